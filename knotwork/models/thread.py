from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple

from knotwork.models.port import PortKey
from knotwork.models.vector import Vec2
from knotwork.utils.splines import HermiteCurve, StepCurve


class WeaveSample(NamedTuple):
    """
    One knot of a traced thread: the pass through a stroke midpoint.

    `entry` and `exit` are the two ports consumed by the pass; the closing
    sample of a thread repeats the first one.
    """

    position: Vec2
    tangent: Vec2
    up: bool
    entry: Optional[PortKey] = None
    exit: Optional[PortKey] = None


class Thread:
    """
    A closed weave path.

    Holds:
      - samples   : the traced passes, last sample equal to the first
      - path      : closed Hermite curve through the sample positions
      - z         : closed 0/1 step curve, 1.0 where the thread is over
    """

    def __init__(self, samples: Sequence[WeaveSample], path: HermiteCurve, z: StepCurve):
        self.samples: Tuple[WeaveSample, ...] = tuple(samples)
        self.path = path
        self.z = z

    @property
    def pass_count(self) -> int:
        """Number of midpoint passes, not counting the closing sample."""
        return len(self.samples) - 1

    def port_keys(self) -> List[PortKey]:
        """Every port consumed by this thread, in trace order."""
        keys = []
        for s in self.samples[:-1]:
            keys.append(s.entry)
            keys.append(s.exit)
        return keys

    def position(self, t: float) -> Vec2:
        return self.path(t)

    def is_over(self, t: float) -> bool:
        return self.z(t) >= 0.5

    def __repr__(self):
        return f"Thread(passes={self.pass_count}, knots={self.path.knot_count})"


class Art:
    """
    The result of weaving one stroke mesh: an ordered, immutable collection
    of threads. Owns its threads outright.
    """

    def __init__(self, threads: Sequence[Thread]):
        self._threads: Tuple[Thread, ...] = tuple(threads)

    @property
    def threads(self) -> Tuple[Thread, ...]:
        return self._threads

    @property
    def thread_count(self) -> int:
        return len(self._threads)

    def get_thread(self, index: int) -> HermiteCurve:
        """Smooth path of thread `index`."""
        return self._threads[index].path

    def get_z(self, index: int) -> StepCurve:
        """Over/under step curve of thread `index`."""
        return self._threads[index].z

    def __len__(self):
        return len(self._threads)

    def __iter__(self) -> Iterator[Thread]:
        return iter(self._threads)

    def __getitem__(self, index: int) -> Thread:
        return self._threads[index]

    def __repr__(self):
        return f"Art(threads={self.thread_count})"
