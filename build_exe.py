"""
PyInstaller で Tkinter を含めて三目並べの実行ファイルを作るためのビルドスクリプト。

ポイント
- _tkinter の DLL エラー回避のため、Tcl/Tk データを自動同梱
- `--onefile` を付けたい場合は引数に指定
- `icon.ico` がこのファイルと同じ場所にあれば自動でアイコン適用

使い方
- 標準: `python build_exe.py`
- 1ファイル: `python build_exe.py --onefile`

出力
- フォルダ版: `dist/TicTacToe/TicTacToe(.exe)`
- 1ファイル版: `dist/TicTacToe(.exe)`
"""

from __future__ import annotations

import os
import sys
from typing import Iterable, List

import PyInstaller.__main__


APP_NAME = "TicTacToe"
HERE = os.path.dirname(os.path.abspath(__file__))


def _is_tcl_tk_dll(name: str) -> bool:
    lower = name.lower()
    return lower.endswith(".dll") and (lower.startswith("tcl") or lower.startswith("tk"))


def collect_tcl_tk_add_data(base: str = sys.base_prefix) -> List[str]:
    """Tcl/Tk のライブラリディレクトリを探索して --add-data の指定を返す。

    候補（CPython / conda）:
      - <base>/tcl/
      - <base>/Library/tcl/
    """
    add_data: List[str] = []
    for tcl_root in (os.path.join(base, "tcl"), os.path.join(base, "Library", "tcl")):
        if not os.path.isdir(tcl_root):
            continue
        for name in sorted(os.listdir(tcl_root)):
            src = os.path.join(tcl_root, name)
            if name.startswith(("tcl", "tk")) and os.path.isdir(src):
                add_data.append(f"{src}{os.pathsep}{os.path.join('tcl', name)}")
    return add_data


def collect_tk_binaries(base: str = sys.base_prefix) -> List[str]:
    """_tkinter.pyd と tcl/tk の DLL を --add-binary で同梱する指定を返す。"""
    bins: List[str] = []
    pyd = os.path.join(base, "DLLs", "_tkinter.pyd")
    if os.path.isfile(pyd):
        bins.append(f"{pyd}{os.pathsep}.")
    # CPython は DLLs/、conda 系は Library/bin/
    for dll_dir in (os.path.join(base, "DLLs"), os.path.join(base, "Library", "bin")):
        if not os.path.isdir(dll_dir):
            continue
        for name in sorted(os.listdir(dll_dir)):
            path = os.path.join(dll_dir, name)
            if _is_tcl_tk_dll(name) and os.path.isfile(path):
                bins.append(f"{path}{os.pathsep}.")
    return bins


def _repeat(flag: str, values: Iterable[str]) -> List[str]:
    opts: List[str] = []
    for value in values:
        opts += [flag, value]
    return opts


def build_options(argv: List[str]) -> List[str]:
    """PyInstaller に渡す引数一覧を組み立てる。"""
    opts: List[str] = [
        "--noconsole",
        "--name",
        APP_NAME,
        "--hidden-import",
        "tkinter",
        "--hidden-import",
        "_tkinter",
        "--collect-all",
        "tkinter",
    ]

    if "--onefile" in argv:
        opts.append("--onefile")

    icon_path = os.path.join(HERE, "icon.ico")
    if os.path.exists(icon_path):
        opts += ["--icon", icon_path]

    opts += _repeat("--add-data", collect_tcl_tk_add_data())
    opts += _repeat("--add-binary", collect_tk_binaries())

    # ランタイムフックで実行時に tcl/tk の場所を解決
    rt_hook = os.path.join(HERE, "rt_tk_path.py")
    if os.path.exists(rt_hook):
        opts += ["--runtime-hook", rt_hook]

    # エントリ（パッケージ側の main から起動 → GUI）
    opts.append(os.path.join(HERE, "tictactoe", "main.py"))
    return opts


def main() -> None:
    opts = build_options(sys.argv[1:])
    print("PyInstaller options:")
    for o in opts:
        print(" ", o)
    PyInstaller.__main__.run(opts)


if __name__ == "__main__":
    main()
