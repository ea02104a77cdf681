"""
PyInstaller 実行時に Tcl/Tk の参照先をアプリ内に向けるランタイムフック。

実行ファイル内の `tcl/` 以下にある `tcl8.x` / `tk8.x` を
`TCL_LIBRARY` / `TK_LIBRARY` に設定する（既に設定済みなら触らない）。
環境変数はプロセス内でのみ有効。
"""

from __future__ import annotations

import glob
import os
import sys
from typing import Dict, Optional


ENV_PATTERNS = {
    "TCL_LIBRARY": "tcl*",
    "TK_LIBRARY": "tk*",
}


def bundle_dir() -> str:
    # onefile 時は展開先、onedir 時は実行ファイルのディレクトリ
    return getattr(sys, "_MEIPASS", os.path.dirname(sys.executable))


def find_tcl_tk_dirs(base: str) -> Dict[str, Optional[str]]:
    found: Dict[str, Optional[str]] = {}
    for var, pattern in ENV_PATTERNS.items():
        paths = sorted(glob.glob(os.path.join(base, "tcl", pattern)))
        found[var] = paths[0] if paths else None
    return found


def setup_tcl_tk_env(base: Optional[str] = None) -> None:
    for var, path in find_tcl_tk_dirs(base or bundle_dir()).items():
        if path and not os.environ.get(var):
            os.environ[var] = path


if getattr(sys, "frozen", False):
    setup_tcl_tk_env()
