"""Map rendered display lines back onto the change set"""


class DisplayLineRef:
    """The model node behind one display line

    file_index is always set.  hunk_index is set for hunk headers and diff
    lines, and line_index only for diff lines.  All indexes are 0-based.
    line_number is the source line number the display line resolves to.

    """

    __slots__ = ('file_index', 'hunk_index', 'line_index', 'line_number')

    def __init__(self, file_index, hunk_index=None, line_index=None, line_number=1):
        self.file_index = file_index
        self.hunk_index = hunk_index
        self.line_index = line_index
        self.line_number = line_number

    def is_file_header(self):
        return self.hunk_index is None

    def is_hunk_header(self):
        return self.hunk_index is not None and self.line_index is None

    def _key(self):
        return (self.file_index, self.hunk_index, self.line_index, self.line_number)

    def __eq__(self, other):
        return isinstance(other, DisplayLineRef) and self._key() == other._key()

    def __repr__(self):
        return 'DisplayLineRef(file=%r, hunk=%r, line=%r, line_number=%r)' % (
            self._key()
        )


class Location:
    """A source location that can be opened in an editor"""

    __slots__ = ('path', 'line_number', 'ref')

    def __init__(self, path, line_number, ref):
        self.path = path
        self.line_number = line_number
        self.ref = ref

    def __eq__(self, other):
        return isinstance(other, Location) and (
            self.path,
            self.line_number,
            self.ref,
        ) == (other.path, other.line_number, other.ref)

    def __repr__(self):
        return 'Location(%r, %r)' % (self.path, self.line_number)


def _clamp(line_number):
    if not line_number or line_number < 1:
        return 1
    return line_number


class LineMap:
    """Index from 1-based display line numbers to DisplayLineRef entries"""

    def __init__(self):
        self._refs = {}
        self._file_headers = {}

    def add_file_header(self, display_line, file_index):
        self._file_headers[file_index] = display_line
        ref = DisplayLineRef(file_index, line_number=1)
        self._refs[display_line] = ref
        return ref

    def add_hunk_header(self, display_line, file_index, hunk_index, hunk):
        ref = DisplayLineRef(
            file_index, hunk_index=hunk_index, line_number=_clamp(hunk.new_start)
        )
        self._refs[display_line] = ref
        return ref

    def add_diff_line(self, display_line, file_index, hunk_index, line_index, line):
        ref = DisplayLineRef(
            file_index,
            hunk_index=hunk_index,
            line_index=line_index,
            line_number=_clamp(line.line_number()),
        )
        self._refs[display_line] = ref
        return ref

    def get(self, display_line):
        """Return the DisplayLineRef for a display line, or None"""
        return self._refs.get(display_line)

    def file_header_line(self, file_index):
        """Return the display line of a file's header, or None"""
        return self._file_headers.get(file_index)

    def entity(self, files, display_line):
        """Return the (file, hunk, line) nodes behind a display line

        Missing levels are None.  None is returned for unmapped lines.

        """
        ref = self.get(display_line)
        if ref is None:
            return None
        changed_file = files[ref.file_index]
        hunk = line = None
        if ref.hunk_index is not None:
            hunk = changed_file.hunks[ref.hunk_index]
            if ref.line_index is not None:
                line = hunk.lines[ref.line_index]
        return (changed_file, hunk, line)

    def resolve(self, files, display_line, ref=None):
        """Return the most specific source Location for a display line"""
        entry = self.get(display_line)
        if entry is None:
            return None
        changed_file = files[entry.file_index]
        return Location(changed_file.path, _clamp(entry.line_number), ref)

    def display_lines(self):
        return sorted(self._refs)

    def items(self):
        return sorted(self._refs.items())

    def __contains__(self, display_line):
        return display_line in self._refs

    def __len__(self):
        return len(self._refs)

    def __eq__(self, other):
        return isinstance(other, LineMap) and self._refs == other._refs

    def __repr__(self):
        return 'LineMap(%d entries)' % len(self._refs)
