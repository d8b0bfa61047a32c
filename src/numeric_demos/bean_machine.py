# src/numeric_demos/bean_machine.py

import random
from typing import Callable, List, Optional

from .errors import InvalidArgument
from .histogram import Histogram
from .logging_config import get_logger

logger = get_logger(__name__)

CoinFn = Callable[[], bool]


def flip_coin(rng: Optional[random.Random] = None) -> bool:
    """
    Fair coin: True and False with probability 1/2 each.
    Uses the module-level generator unless `rng` is given.
    """
    source = rng if rng is not None else random
    return source.getrandbits(1) == 1


def _check_positions(positions: range) -> None:
    if len(positions) == 0:
        raise InvalidArgument("position range must be non-empty")
    if positions.step != 1:
        raise InvalidArgument("position range must have step 1")


def drop_ball(
    start_position: int,
    depth: int,
    positions: range,
    coin: Optional[CoinFn] = None,
) -> int:
    """
    Drop one ball through `depth` rows of pegs and return the bin it lands in.

    Row d carries a bump of +1 when d is even and -1 when d is odd. At each
    row a fair coin decides whether the bump is applied, and the position is
    clamped back into `positions` after every row. Pairs of rows therefore
    move the ball by -1, 0 or +1, which gives a symmetric binomial walk for
    even depths. An odd depth leaves one unmatched +1 row and biases the
    result to the right.

    `coin` replaces the random source; it is called once per row.
    """
    _check_positions(positions)
    if start_position not in positions:
        raise InvalidArgument(
            f"start_position {start_position} outside [{positions.start}, {positions.stop})"
        )
    if depth < 0:
        raise InvalidArgument("depth must be >= 0")

    toss = coin if coin is not None else flip_coin
    lo = positions.start
    hi = positions.stop - 1

    position = start_position
    for d in range(depth):
        bump = 1 if d % 2 == 0 else -1
        if toss():
            position += bump
        position = min(max(lo, position), hi)

    return position


class BallDropSimulator:
    """
    A board of `size` bins and `depth` peg rows with its own random stream.

    Two simulators built with the same seed drop identical sequences of
    balls. An explicit `coin` overrides the seeded generator.
    """

    def __init__(
        self,
        size: int,
        depth: int,
        seed: Optional[int] = None,
        coin: Optional[CoinFn] = None,
    ):
        if size <= 0:
            raise InvalidArgument("size must be > 0")
        if depth < 0:
            raise InvalidArgument("depth must be >= 0")

        self.size = size
        self.depth = depth
        self.positions = range(size)
        self._rng = random.Random(seed)
        self._coin = coin

    def flip_coin(self) -> bool:
        if self._coin is not None:
            return self._coin()
        return flip_coin(self._rng)

    def drop(self, start_position: Optional[int] = None) -> int:
        """
        Drop one ball, from the middle bin unless told otherwise.
        """
        start = self.size // 2 if start_position is None else start_position
        return drop_ball(start, self.depth, self.positions, coin=self.flip_coin)


def run_bean_machine_simulation(
    size: int,
    depth: int,
    trials: int,
    seed: Optional[int] = None,
    coin: Optional[CoinFn] = None,
) -> List[int]:
    """
    Drop `trials` balls from bin size // 2 through `depth` rows over
    [0, size) and return the final histogram counts (length `size`).
    """
    if trials < 0:
        raise InvalidArgument("trials must be >= 0")

    simulator = BallDropSimulator(size, depth, seed=seed, coin=coin)
    if depth % 2 == 1:
        logger.warning(
            "odd depth %d leaves an unmatched +1 row; results will lean right", depth
        )

    histogram = Histogram(size)
    for _ in range(trials):
        histogram.record(simulator.drop())

    logger.debug("dropped %d balls (size=%d, depth=%d)", trials, size, depth)
    return histogram.snapshot_counts()
