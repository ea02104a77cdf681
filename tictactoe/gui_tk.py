"""
Tkinter を使った三目並べのGUI実装。

目的と方針
- `logic.GameEngine`（ルール）をUIから呼び出す薄い層に徹する
- ボタン（マス）とクリック入力、結果ダイアログ、終了確認を担当
- 盤面の状態はエンジンだけが持ち、ボタンは毎回エンジンから描き直す

主なUI要素
- 上部: ステータス表示（手番 / 結果）
- 中央: 3x3 のボタン（マス）
- 下部: Quit ボタン（確認ダイアログ付き）

操作の流れ
1) マスをクリックして着手（埋まっているマスは警告ダイアログ）
2) 勝利・引き分けで「もう一度遊びますか？」を確認
3) はい → 盤をリセット、いいえ → ウィンドウを閉じる
"""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import messagebox
from typing import Dict, Optional

from . import logic

logger = logging.getLogger(__name__)

TITLE = "Tic Tac Toe"
WINDOW_WIDTH = 400
WINDOW_HEIGHT = 450
CELL_FONT = ("Arial", 60, "bold")
HIGHLIGHT = "#b9f6ca"


def status_text(engine: logic.GameEngine) -> str:
    """ステータスバーに出す文字列。"""
    if engine.winner is not None:
        return f"Player {engine.winner} wins!"
    if engine.is_over:
        return "The game is a tie!"
    return f"Turn: {engine.get_current_player()}"


class TicTacToeApp:
    """アプリケーションクラス（エンジンの状態とボタンの橋渡し）。"""

    def __init__(self, root: tk.Tk, engine: Optional[logic.GameEngine] = None):
        self.root = root
        self.root.title(TITLE)
        self.engine = engine or logic.GameEngine()

        self.status = tk.StringVar(value="Ready")
        tk.Label(root, textvariable=self.status, anchor="center").pack(side=tk.TOP, fill=tk.X)

        # 盤面（3x3 グリッド）
        self.board_frame = tk.Frame(root)
        self.board_frame.pack(fill=tk.BOTH, expand=True)
        self.buttons: Dict[logic.Coord, tk.Button] = {}
        for r in range(logic.SIZE):
            self.board_frame.rowconfigure(r, weight=1, uniform="cell")
            self.board_frame.columnconfigure(r, weight=1, uniform="cell")
            for c in range(logic.SIZE):
                btn = tk.Button(self.board_frame, text="", font=CELL_FONT,
                                command=lambda rr=r, cc=c: self.on_click(rr, cc))
                btn.grid(row=r, column=c, sticky="nsew")
                self.buttons[(r, c)] = btn
        self.default_bg = self.buttons[(0, 0)].cget("background")

        # 下部の操作バー
        self.bottom = tk.Frame(root)
        self.bottom.pack(side=tk.BOTTOM, fill=tk.X)
        tk.Button(self.bottom, text="Quit", command=self.confirm_quit).pack()

        self.root.protocol("WM_DELETE_WINDOW", self.confirm_quit)
        self.center_on_screen()
        self.redraw()

    # ----- Game control -----
    def new_game(self) -> None:
        """盤を初期化して再描画。"""
        self.engine.reset()
        logger.info("new game")
        self.redraw()

    def close(self) -> None:
        logger.info("closing window")
        self.root.destroy()

    # ----- Rendering -----
    def redraw(self) -> None:
        """エンジンの状態から全ボタンとステータスを描き直す。"""
        line = self.engine.winning_line() or ()
        for (r, c), btn in self.buttons.items():
            mark = self.engine.get_cell(r, c)
            state = tk.NORMAL if mark == logic.EMPTY and not self.engine.is_over else tk.DISABLED
            bg = HIGHLIGHT if (r, c) in line else self.default_bg
            btn.configure(text=mark, state=state, background=bg)
        self.status.set(status_text(self.engine))

    def center_on_screen(self) -> None:
        """ウィンドウを画面中央に配置する。"""
        self.root.update_idletasks()
        sw = self.root.winfo_screenwidth()
        sh = self.root.winfo_screenheight()
        x = max(0, int((sw - WINDOW_WIDTH) / 2))
        y = max(0, int((sh - WINDOW_HEIGHT) / 2))
        self.root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}+{x}+{y}")

    # ----- Interaction -----
    def on_click(self, r: int, c: int) -> None:
        """クリック処理。打てない手は警告し、終局なら再戦を確認する。"""
        try:
            result = self.engine.apply_move(r, c)
        except logic.IllegalMoveError as exc:
            messagebox.showwarning("Illegal Move", str(exc), parent=self.root)
            return
        self.redraw()
        if result.is_terminal:
            self.game_over(logic.result_message(result))

    def game_over(self, message: str) -> None:
        """結果を表示して再戦を確認。いいえならウィンドウを閉じる。"""
        again = messagebox.askyesno("Game Over", f"{message}\nDo you want to play again?", parent=self.root)
        if again:
            self.new_game()
        else:
            self.close()

    def confirm_quit(self) -> None:
        """Quit ボタン / ウィンドウの×ボタン。確認してから閉じる。"""
        if messagebox.askyesno("Confirm Quit", "Are you sure you want to quit?", parent=self.root):
            self.close()


def main() -> None:
    """GUIエントリーポイント。"""
    root = tk.Tk()
    TicTacToeApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
