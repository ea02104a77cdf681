"""
テキストベースのCLI UI。

役割
- 盤面の描画
- 入力受付（座標入力 / 再戦確認）
- ターン進行と勝敗表示

設計のポイント
- ルール判定は `logic.GameEngine` に委譲してUIに専念
- 例外 `KeyboardInterrupt` で中断（Ctrl+C や `q` 入力を同扱い）
"""

from __future__ import annotations

import logging
from typing import Optional

from . import logic

logger = logging.getLogger(__name__)


def _render_cell(v: str) -> str:
    """セルの内部値を表示用文字に変換。"""
    return v if v != logic.EMPTY else "."


def print_board(engine: logic.GameEngine) -> None:
    """盤面を座標ラベル付きで描画。"""
    n = logic.SIZE
    header = "   " + " ".join(chr(ord("A") + i) for i in range(n))
    print(header)
    for r in range(n):
        row = " ".join(_render_cell(engine.get_cell(r, c)) for c in range(n))
        print(f"{r+1:>2} {row}")


def prompt_move(player: str) -> Optional[logic.Coord]:
    """座標入力を受け付ける。形式が不正なら None。"""
    s = input(f"Player {player}, enter a square (e.g. b2) / q: ").strip()
    if s.lower() in {"q", "quit", "exit"}:
        raise KeyboardInterrupt
    coord = logic.parse_coord(s)
    if coord is None:
        print("Could not read that square. Examples: b2, 2b or '1 1'.")
    return coord


def ask_play_again() -> bool:
    """再戦するかを y/n で確認。"""
    while True:
        s = input("Do you want to play again? [y/n]: ").strip().lower()
        if s in {"y", "yes"}:
            return True
        if s in {"n", "no", "q", "quit"}:
            return False
        print("Please answer 'y' or 'n'.")


def play_game(engine: logic.GameEngine) -> logic.MoveResult:
    """1局を終局まで進め、最後の結果を返す。"""
    while True:
        print_board(engine)
        coord = prompt_move(engine.get_current_player())
        if coord is None:
            continue
        result = engine.try_move(*coord)
        if result.outcome is logic.Outcome.ILLEGAL:
            print(result.reason)
            continue
        if result.is_terminal:
            print_board(engine)
            print(logic.result_message(result))
            return result


def game_loop(engine: Optional[logic.GameEngine] = None) -> None:
    """ゲームのメインループ。再戦を断ると戻る。"""
    engine = engine or logic.GameEngine()
    while True:
        logger.info("new game")
        play_game(engine)
        if not ask_play_again():
            return
        engine.reset()


def main() -> None:
    """エントリーポイント。"""
    print("==== Tic Tac Toe ====")
    try:
        game_loop()
    except KeyboardInterrupt:
        print("\nGoodbye.")


if __name__ == "__main__":
    main()
