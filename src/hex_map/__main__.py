"""Module entrypoint for `python -m hex_map`."""

if __package__ is None or __package__ == "":
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from hex_map.play_map import play_map


if __name__ == "__main__":
    play_map()
