"""
三目並べ（Tic-Tac-Toe）のコアロジック。

役割
- 盤面表現・初期盤面の生成
- 着手の合法判定（範囲外・埋まっているマス・終局後）
- 勝利ライン／引き分けの判定
- 手番交代と状態遷移（進行中 → 勝利 / 引き分け）

設計のポイント
- 盤面は `List[List[str]]`（"" = 空, "X", "O"）で表現
- 判定系はモジュール関数（盤面の純粋関数）、状態は `GameEngine` が専有
- UI は `GameEngine` を呼び出し、返ってきた `MoveResult` とクエリ結果で再描画する
- 終了（ウィンドウを閉じる等）は呼び出し側の判断。エンジンはプロセスを終了させない
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple


logger = logging.getLogger(__name__)

# セル状態の定数
EMPTY = ""  # 空きマス
X = "X"     # 先手
O = "O"     # 後手

SIZE = 3
# 1手ずつ交互に打つ限り、5手目より前に3つ揃うことはない
WIN_CHECK_FROM = 5

Player = str  # X or O
Coord = Tuple[int, int]


# 勝利ライン（行3・列3・斜め2 の計8本）
LINES: Tuple[Tuple[Coord, Coord, Coord], ...] = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


class IllegalMoveError(ValueError):
    """打てない手（埋まっているマス等）。盤面は変更されない。"""


class InvalidCoordinateError(IllegalMoveError):
    """盤外の座標が指定された。"""


class GameOverError(IllegalMoveError):
    """終局後に着手しようとした。`reset()` まで受け付けない。"""


class GameState(enum.Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    TIED = "tied"


class Outcome(enum.Enum):
    ILLEGAL = "illegal"
    CONTINUE = "continue"
    WIN = "win"
    TIE = "tie"


@dataclass(frozen=True)
class MoveResult:
    """着手の結果。

    - ILLEGAL: `player` は手番のまま、`reason` に理由
    - CONTINUE: `player` は次の手番
    - WIN: `player` は勝者
    - TIE: `player` は None
    """

    outcome: Outcome
    player: Optional[Player] = None
    reason: str = ""

    @property
    def is_terminal(self) -> bool:
        return self.outcome in (Outcome.WIN, Outcome.TIE)


def opponent(player: Player) -> Player:
    """与えられたプレイヤーの相手側を返す。"""
    return O if player == X else X


def create_board() -> List[List[str]]:
    """空の 3x3 盤面を作成する。"""
    return [[EMPTY for _ in range(SIZE)] for _ in range(SIZE)]


def in_bounds(r: int, c: int) -> bool:
    """(r, c) が盤面内かどうか。"""
    return 0 <= r < SIZE and 0 <= c < SIZE


def winning_line(board: Sequence[Sequence[str]], player: Player) -> Optional[Tuple[Coord, ...]]:
    """`player` が揃えたラインのうち最初の1本を返す。無ければ None。"""
    for line in LINES:
        if all(board[r][c] == player for r, c in line):
            return line
    return None


def check_win(board: Sequence[Sequence[str]], player: Player) -> bool:
    """8本の勝利ラインのいずれかが `player` で埋まっていれば True。"""
    return winning_line(board, player) is not None


def parse_coord(text: str) -> Optional[Coord]:
    """ユーザー入力の座標文字列から (row, col) を返す。

    受け付ける例: "b2", "2b"（列は a-c、行は 1-3。大文字小文字は不問）、
    "1 2" / "1,2"（0 始まりの行・列番号）。
    範囲チェックは行わない（`GameEngine.apply_move` 側で判定）。
    不正な入力は None。
    """
    s = text.strip().lower()
    parts = s.replace(",", " ").split()
    if len(parts) == 2:
        try:
            return (int(parts[0]), int(parts[1]))
        except ValueError:
            return None
    if len(s) < 2:
        return None
    col = s[0]
    row_str = s[1:]
    if not col.isalpha() or not row_str.isdigit():
        # Try reversed like 2b
        if s[-1].isalpha() and s[:-1].isdigit():
            row_str = s[:-1]
            col = s[-1]
        else:
            return None
    c = ord(col) - ord("a")
    try:
        r = int(row_str) - 1
    except ValueError:
        return None
    return (r, c)


def coord_to_str(coord: Coord) -> str:
    """(row, col) を "A1" 形式の座標文字列へ。"""
    r, c = coord
    return f"{chr(ord('A') + c)}{r + 1}"


def result_message(result: MoveResult) -> str:
    """終局時の表示メッセージ（GUI/CLI 共通）。"""
    if result.outcome is Outcome.WIN:
        return f"Player {result.player} wins!"
    if result.outcome is Outcome.TIE:
        return "The game is a tie!"
    if result.outcome is Outcome.ILLEGAL:
        return result.reason
    return f"Player {result.player}'s turn"


class GameEngine:
    """盤面・手番・手数を専有し、着手の適用と状態問い合わせを提供する。

    描画については何も知らない。UI 層は `apply_move` / `try_move` を呼び、
    `get_cell` / `get_current_player` などの結果で画面を作り直す。
    """

    def __init__(self) -> None:
        self._board = create_board()
        self._player: Player = X  # X always starts
        self._move_count = 0
        self._state = GameState.IN_PROGRESS
        self._winner: Optional[Player] = None

    # ----- Commands -----
    def reset(self) -> None:
        """全マスを空にし、X の手番・手数 0・進行中に戻す。"""
        self._board = create_board()
        self._player = X
        self._move_count = 0
        self._state = GameState.IN_PROGRESS
        self._winner = None
        logger.debug("board reset")

    def apply_move(self, row: int, col: int) -> MoveResult:
        """現在の手番で (row, col) に着手し、結果を返す。

        打てない手は `IllegalMoveError`（またはそのサブクラス）を送出し、
        状態は一切変更しない。勝利・引き分けでも自動リセットはしない。
        """
        self._validate(row, col)

        player = self._player
        self._board[row][col] = player
        self._move_count += 1
        logger.debug("move %d: %s at %s", self._move_count, player, coord_to_str((row, col)))

        # 勝利判定は5手目から
        if self._move_count >= WIN_CHECK_FROM and self.check_win(player):
            self._state = GameState.WON
            self._winner = player
            logger.info("player %s wins after %d moves", player, self._move_count)
            return MoveResult(Outcome.WIN, player)

        if self._move_count == SIZE * SIZE:
            self._state = GameState.TIED
            logger.info("game tied")
            return MoveResult(Outcome.TIE)

        self._player = opponent(player)
        return MoveResult(Outcome.CONTINUE, self._player)

    def try_move(self, row: int, col: int) -> MoveResult:
        """`apply_move` と同じだが、打てない手は ILLEGAL の結果として返す。"""
        try:
            return self.apply_move(row, col)
        except IllegalMoveError as exc:
            return MoveResult(Outcome.ILLEGAL, self._player, str(exc))

    def _validate(self, row: int, col: int) -> None:
        # bool は int のサブクラスなので明示的に弾く
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (row, col)) or not in_bounds(row, col):
            logger.info("rejected move (%r, %r): out of range", row, col)
            raise InvalidCoordinateError(f"Invalid coordinate ({row}, {col}): row and column must be 0-{SIZE - 1}.")
        if self._state is not GameState.IN_PROGRESS:
            logger.info("rejected move (%d, %d): game is over", row, col)
            raise GameOverError("The game is over. Start a new game to keep playing.")
        if self._board[row][col] != EMPTY:
            logger.info("rejected move (%d, %d): square taken by %s", row, col, self._board[row][col])
            raise IllegalMoveError("Illegal move! Square already taken. Please try again.")

    # ----- Queries -----
    def check_win(self, player: Player) -> bool:
        return check_win(self._board, player)

    def get_cell(self, row: int, col: int) -> str:
        if not in_bounds(row, col):
            raise InvalidCoordinateError(f"Invalid coordinate ({row}, {col}).")
        return self._board[row][col]

    def get_current_player(self) -> Player:
        return self._player

    def legal_moves(self) -> List[Coord]:
        """空いているマスの一覧（終局後は空リスト）。"""
        if self.is_over:
            return []
        return [(r, c) for r in range(SIZE) for c in range(SIZE) if self._board[r][c] == EMPTY]

    def winning_line(self) -> Optional[Tuple[Coord, ...]]:
        if self._winner is None:
            return None
        return winning_line(self._board, self._winner)

    @property
    def board(self) -> List[List[str]]:
        """盤面のコピー（外部からの変更はエンジンに影響しない）。"""
        return [row[:] for row in self._board]

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def is_over(self) -> bool:
        return self._state is not GameState.IN_PROGRESS
