from __future__ import annotations

from snakegame.app import main


if __name__ == "__main__":
    main()
