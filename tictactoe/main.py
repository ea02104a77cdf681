"""
起動スクリプト。既定では Tkinter GUI、`--cli` でテキスト版を起動する。

通常の起動は `python -m tictactoe.main` でも可能ですが、
このファイルを直接実行した場合（PyInstaller のエントリ）でも動くように
相対インポートを優先し、失敗時は親ディレクトリを `sys.path` に追加しています。
"""

from __future__ import annotations

import argparse
from typing import List, Optional

try:
    # パッケージ内からの相対 import（推奨ルート）
    from .logging_config import setup_logging
except ImportError:
    # 単体ファイル実行に対応: python tictactoe/main.py
    import os
    import sys
    sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    from tictactoe.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tictactoe", description="Two-player Tic Tac Toe.")
    parser.add_argument("--cli", action="store_true", help="play in the terminal instead of a window")
    parser.add_argument("--log-level", default="WARNING",
                        help="logging level (DEBUG, INFO, WARNING, ...)")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    if args.cli:
        from tictactoe import cli
        cli.main()
        return
    from tictactoe import gui_tk
    gui_tk.main()


if __name__ == "__main__":
    main()
