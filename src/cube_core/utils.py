# ======================
# file: cube_core/utils.py
# ======================
from typing import Dict, List, Mapping, Sequence

NET_ORDER = ("U", "L", "F", "R", "B", "D")

_LETTER_TO_COLOR = {
    'w': 'white', 'y': 'yellow',
    'r': 'red', 'o': 'orange',
    'b': 'blue', 'g': 'green'}

_COLOR_TO_LETTER = {v: k for k, v in _LETTER_TO_COLOR.items()}


def _cell(colour: str) -> str:
    return f"[{_COLOR_TO_LETTER.get(colour, colour[:1].lower())}]"


def format_cube_net(snapshot: Mapping[str, Sequence[str]]) -> str:
    """
    Formats a facelet snapshot as the unfolded net:

             [w][w][w]
             [w][w][w]
             [w][w][w]
    [o][o][o][b][b][b][r][r][r][g][g][g]
    [o][o][o][b][b][b][r][r][r][g][g][g]
    [o][o][o][b][b][b][r][r][r][g][g][g]
             [y][y][y]
             [y][y][y]
             [y][y][y]
    """
    pad = " " * 9
    lines = []
    for r in range(3):
        lines.append(pad + "".join(_cell(c) for c in snapshot["U"][3 * r: 3 * r + 3]))
    for r in range(3):
        lines.append("".join(
            _cell(c) for face in ("L", "F", "R", "B") for c in snapshot[face][3 * r: 3 * r + 3]
        ))
    for r in range(3):
        lines.append(pad + "".join(_cell(c) for c in snapshot["D"][3 * r: 3 * r + 3]))
    return "\n".join(lines) + "\n"


def parse_cube_net(net: str) -> Dict[str, List[str]]:
    """
    Parses the textual net produced by :func:`format_cube_net` back into a
    snapshot {face: [9 colour names]}.

    Each middle row carries 36 chars (L F R B), the top/bottom rows 9 chars
    after stripping whitespace.
    """
    def parse_row(segment):
        """Extracts the 3 colours from a 9-character substring like '[x][x][x]'."""
        if len(segment) != 9:
            raise ValueError(f"Expected a 9-character row segment, got {segment!r}")
        chars = [segment[1], segment[4], segment[7]]
        return [_LETTER_TO_COLOR.get(c.lower(), c) for c in chars]

    lines = [line for line in net.split('\n') if line.strip()]
    if len(lines) != 9:
        raise ValueError(f"A cube net has 9 non-empty lines, got {len(lines)}")

    faces: Dict[str, List[str]] = {face: [] for face in NET_ORDER}
    for i in range(3):
        faces["U"].extend(parse_row(lines[i].strip()))
    for i in range(3, 6):
        line = lines[i].strip()
        faces["L"].extend(parse_row(line[0:9]))
        faces["F"].extend(parse_row(line[9:18]))
        faces["R"].extend(parse_row(line[18:27]))
        faces["B"].extend(parse_row(line[27:36]))
    for i in range(6, 9):
        faces["D"].extend(parse_row(lines[i].strip()))
    return faces


def format_cube_dict_as_string(snapshot: Mapping[str, Sequence[str]]) -> str:
    """Formats the snapshot into a readable per-face listing, one row per line."""
    face_strings = []
    for face_name in NET_ORDER:
        stickers = snapshot[face_name]
        face_strings.append(f"{face_name}:")
        for r in range(3):
            face_strings.append(f"  {list(stickers[3 * r: 3 * r + 3])}")
        face_strings.append("")  # blank line between faces

    return "\n".join(face_strings)
