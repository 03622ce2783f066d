"""
Chord and scale shape registries, and the loader for their text databases.

Both databases use the same record format, one shape per line:

    name:offset1:offset2:...

e.g. ``dur:0:4:7`` or ``melodic minor:0:2:3:5:7:9:11``. Offsets are semitones
above the shape's root. They are not checked for range or duplicates; every
consumer reduces them modulo 12.

The chord registry is loaded once and keyed by name. The scale registry is a
plain ordered list (duplicate entries are legal and scored independently) and
is meant to be reloaded before every analysis.
"""
import re
from collections import namedtuple

from .constants import RECORD_SEPARATOR

IntervalPattern = namedtuple("IntervalPattern", ["name", "offsets"])

_OFFSET_RE = re.compile(r"[+-]?\d+")


class ShapeNotFoundError(KeyError):
    """An input chord refers to a shape name the chord registry does not know."""

    def __init__(self, name):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"Unknown chord shape: {self.name!r}"


class RegistryFormatError(ValueError):
    """A database line could not be parsed."""

    def __init__(self, message, path=None, line_no=None):
        location = ""
        if path is not None:
            location = f"{path}:{line_no}: " if line_no is not None else f"{path}: "
        super().__init__(location + message)
        self.path = path
        self.line_no = line_no


def parse_shape_line(line: str) -> IntervalPattern:
    """
    Parse one ``name:o1:o2:...`` record into an IntervalPattern.

    Raises RegistryFormatError if any offset is not a base-10 integer.
    """
    parts = line.rstrip("\r\n").split(RECORD_SEPARATOR)
    name, raw_offsets = parts[0], parts[1:]
    # Trailing separators carry no offset ("dur:0:4:7:" == "dur:0:4:7")
    while raw_offsets and raw_offsets[-1] == "":
        raw_offsets.pop()
    offsets = []
    for raw in raw_offsets:
        if not _OFFSET_RE.fullmatch(raw):
            raise RegistryFormatError(f"invalid offset {raw!r} in shape {name!r}")
        offsets.append(int(raw))
    return IntervalPattern(name, tuple(offsets))


def _iter_shape_file(path):
    with open(path, encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                yield parse_shape_line(line)
            except RegistryFormatError as e:
                raise RegistryFormatError(str(e), path=path, line_no=line_no) from e


class ChordShapeRegistry:
    """Chord shapes keyed by unique name, in the order they were added."""

    def __init__(self, shapes=()):
        self._shapes = {}
        for shape in shapes:
            self.add(shape)

    def add(self, shape):
        # Re-adding a name replaces the offsets but keeps the original position.
        self._shapes[shape.name] = IntervalPattern(shape.name, tuple(shape.offsets))

    def offsets_for(self, name):
        try:
            return self._shapes[name].offsets
        except KeyError:
            raise ShapeNotFoundError(name) from None

    def names(self):
        return list(self._shapes)

    @classmethod
    def from_dict(cls, mapping):
        """Build from a ``{name: offsets}`` mapping, keeping its order."""
        return cls(IntervalPattern(name, offsets) for name, offsets in mapping.items())

    def __contains__(self, name):
        return name in self._shapes

    def __iter__(self):
        return iter(self._shapes.values())

    def __len__(self):
        return len(self._shapes)

    def __repr__(self):
        return f"ChordShapeRegistry({self.names()!r})"


class ScaleShapeRegistry:
    """Ordered list of scale shapes. Duplicates are kept."""

    def __init__(self, shapes=()):
        self._shapes = [IntervalPattern(s.name, tuple(s.offsets)) for s in shapes]

    def add(self, shape):
        self._shapes.append(IntervalPattern(shape.name, tuple(shape.offsets)))

    def __iter__(self):
        return iter(self._shapes)

    def __len__(self):
        return len(self._shapes)

    def __getitem__(self, idx):
        return self._shapes[idx]

    def __repr__(self):
        return f"ScaleShapeRegistry({[s.name for s in self._shapes]!r})"


def load_chord_shapes(path) -> ChordShapeRegistry:
    """Load the chord database. The first malformed line aborts the load."""
    return ChordShapeRegistry(_iter_shape_file(path))


def load_scale_shapes(path) -> ScaleShapeRegistry:
    """Load the scale database. The first malformed line aborts the load."""
    return ScaleShapeRegistry(_iter_shape_file(path))
