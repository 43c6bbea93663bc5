"""Snake on a 20x20 field, steered with W A S D in a raw terminal."""

from __future__ import annotations

import contextlib
import enum
import os
import random
import select
import sys
import time
from collections import deque
from typing import Any, Iterator, TextIO

WIDTH = 20
HEIGHT = 20
CLEAR = "\033c\033[H"
Cell = tuple[int, int]


class Direction(enum.Enum):
    STOP = (0, 0)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)


_KEYS = {
    "a": (Direction.LEFT, Direction.RIGHT),
    "d": (Direction.RIGHT, Direction.LEFT),
    "w": (Direction.UP, Direction.DOWN),
    "s": (Direction.DOWN, Direction.UP),
}


class Snake:
    """The snake's cells, head first."""

    def __init__(self, x: int, y: int) -> None:
        self._body: deque[Cell] = deque([(x, y)])
        self._length = 1

    def move(self, x: int, y: int, grow: bool) -> None:
        self._body.appendleft((x, y))
        if grow:
            self._length += 1
        else:
            self._body.pop()

    def check_collision(self, x: int, y: int) -> bool:
        """True if (x, y) is on the body behind the head."""
        return any(cell == (x, y) for cell in list(self._body)[1:])

    @property
    def head(self) -> Cell:
        return self._body[0]

    @property
    def length(self) -> int:
        return self._length

    @property
    def body(self) -> tuple[Cell, ...]:
        return tuple(self._body)


class SnakeGame:
    """The game field: the snake, its food and the direction it moves in."""

    def __init__(
        self, username: str, db: Any, rng: random.Random | None = None
    ) -> None:
        self.username = username
        self.db = db
        self._rng = random.Random() if rng is None else rng
        self.snake = Snake(WIDTH // 2, HEIGHT // 2)
        self.direction = Direction.RIGHT
        self.game_over = False
        self.food: Cell = (0, 0)
        self.generate_food()

    def generate_food(self) -> Cell:
        """Place the food on a random cell the snake does not cover."""
        occupied = set(self.snake.body)
        while True:
            cell = (self._rng.randrange(WIDTH), self._rng.randrange(HEIGHT))
            if cell not in occupied:
                self.food = cell
                return cell

    def render(self) -> str:
        head = self.snake.head
        body = set(self.snake.body)
        border = "#" * (WIDTH + 2) + "\n"
        lines = [border]
        for y in range(HEIGHT):
            row = []
            for x in range(WIDTH):
                if (x, y) == self.food:
                    row.append("F")
                elif (x, y) == head:
                    row.append("O")
                elif (x, y) in body:
                    row.append("o")
                else:
                    row.append(" ")
            lines.append("#" + "".join(row) + "#\n")
        lines.append(border)
        lines.append(f"\n\nScore: {self.snake.length}\n")
        return "".join(lines)

    def handle_key(self, key: str) -> None:
        """Turn with W A S D (never straight back); X ends the game."""
        key = key.lower()
        if key == "x":
            self.game_over = True
            return
        turn = _KEYS.get(key)
        if turn is not None:
            new, reverse = turn
            if self.direction is not reverse:
                self.direction = new

    def update(self) -> None:
        """Advance one step, eating food or ending the game on a crash."""
        dx, dy = self.direction.value
        hx, hy = self.snake.head
        x, y = hx + dx, hy + dy
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT) or self.snake.check_collision(x, y):
            self.game_over = True
            return
        grow = (x, y) == self.food
        if grow:
            self.generate_food()
        self.snake.move(x, y, grow)

    def record_score(self) -> int:
        """Count the match and keep the high score; return the score."""
        score = self.snake.length
        rows = self.db.execute(
            "SELECT highscore FROM snake WHERE user = %s;", (self.username,)
        )
        highscore = int(rows[0][0]) if rows else 0
        if score > highscore:
            self.db.execute(
                "UPDATE snake SET matches = matches + 1, highscore = %s WHERE user = %s;",
                (score, self.username),
            )
        else:
            self.db.execute(
                "UPDATE snake SET matches = matches + 1 WHERE user = %s;",
                (self.username,),
            )
        return score

    def play(self) -> int:
        """Run the game on the terminal until it ends; return the score."""
        out = sys.stdout
        with _raw_terminal(sys.stdin):
            while not self.game_over:
                out.write(CLEAR + self.render())
                out.flush()
                key = _read_key(sys.stdin)
                if key:
                    self.handle_key(key)
                self.update()
                time.sleep(0.15)
        out.write(f"Game Over! Final Score: {self.snake.length}\n")
        return self.record_score()


@contextlib.contextmanager
def _raw_terminal(stream: TextIO) -> Iterator[None]:
    """Switch off line buffering and echo while inside the block."""
    if not stream.isatty():
        yield
        return
    import termios

    fd = stream.fileno()
    original = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    raw[6][termios.VMIN] = 0
    raw[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, original)


def _read_key(stream: TextIO, timeout: float = 0.0) -> str | None:
    """Return one pending key press, or None if nothing was typed."""
    fd = stream.fileno()
    ready, _, _ = select.select([fd], [], [], timeout)
    if not ready:
        return None
    data = os.read(fd, 1)
    return data.decode("latin-1") if data else None


def run_snake(username: str, db: Any) -> int:
    out = sys.stdout
    out.write(
        CLEAR
        + "Welcome to Snake! Use W A S D to move. Press X to quit.\n"
        + "Press any key to begin...\n"
    )
    out.flush()
    with _raw_terminal(sys.stdin):
        while _read_key(sys.stdin) is None:
            time.sleep(0.01)
    return SnakeGame(username, db).play()