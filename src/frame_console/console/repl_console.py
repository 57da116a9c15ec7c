import asyncio
import logging
from typing import Optional

from prompt_toolkit.application import run_in_terminal
from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import HTML, FormattedText, to_formatted_text
from prompt_toolkit.formatted_text.html import html_escape
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.shortcuts import PromptSession
from prompt_toolkit.styles import Style
from rich.panel import Panel

import frame_console.console.rendering as rendering
from frame_console.app import ConsoleApp, FrameInput
from frame_console.toggle import KeyboardInput

logger = logging.getLogger(__name__)

# Scan codes reported for the keys the terminal host synthesizes
SCAN_CODE_L = 38
SCAN_CODE_F12 = 88


class ReplConsole:
    """Terminal host: turns prompt_toolkit key presses into passes of a ConsoleApp."""

    app: ConsoleApp
    prompt_session: Optional[PromptSession[str]]

    _tick_task: Optional[asyncio.Task[None]]
    _should_stop_ticking: bool

    style: Style = Style.from_dict({"prompt": "ansicyan bold", "closed": "ansigray"})

    def __init__(
        self, app: ConsoleApp, toggle_key: str = "f12", fps: float = 10.0
    ) -> None:
        self.app = app
        self.toggle_key = toggle_key
        self.fps = fps
        self.prompt_session = None
        self._printed = 0
        self._tick_task = None
        self._should_stop_ticking = False

    def prompt_fragments(self) -> FormattedText:
        """Return the prompt: the console symbol when open, a hint when closed."""
        if not self.app.open.open:
            return to_formatted_text(
                HTML(
                    f"<closed>console closed (<b>{html_escape(self.toggle_key)}</b> "
                    "to open)</closed> "
                )
            )
        return to_formatted_text(
            HTML(f"<prompt>{html_escape(self.app.config.symbol)}</prompt>")
        )

    def step(self, frame: Optional[FrameInput] = None) -> None:
        """Run one pass and print whatever reached the scrollback."""
        self.app.update(frame or FrameInput())
        self._flush_scrollback()

    def _flush_scrollback(self) -> None:
        scrollback = self.app.state.scrollback
        if len(scrollback) < self._printed:
            # Scrollback was cleared since the last flush
            self._printed = 0
            run_in_terminal(rendering.clear_terminal)

        new_lines = scrollback[self._printed :]
        self._printed = len(scrollback)
        if not new_lines:
            return

        def _print() -> None:
            for line in new_lines:
                rendering.render_line(line)

        run_in_terminal(_print)

    async def _tick_loop(self) -> None:
        """Drive passes at a fixed rate so handlers can reply between key presses."""
        try:
            while not self._should_stop_ticking:
                self.step()
                if self.prompt_session and self.prompt_session.app:
                    self.prompt_session.app.invalidate()
                await asyncio.sleep(1 / self.fps)
        except asyncio.CancelledError:
            pass

    def _start_tick_loop(self) -> None:
        if not self._tick_task or self._tick_task.done():
            self._should_stop_ticking = False
            self._tick_task = asyncio.create_task(self._tick_loop())

    def _stop_tick_loop(self) -> None:
        self._should_stop_ticking = True
        if self._tick_task and not self._tick_task.done():
            self._tick_task.cancel()

    def _load_buffer(self, event: KeyPressEvent) -> None:
        state = self.app.state
        event.current_buffer.document = Document(state.buf, state.cursor)

    def get_key_bindings(self) -> KeyBindings:
        """Return the KeyBindings that feed console input into each pass."""
        kb = KeyBindings()

        @kb.add("up")
        def history_up(event: KeyPressEvent) -> None:
            """Recall the previous submitted line."""
            self.step(FrameInput(text=event.current_buffer.text, history_up=True))
            self._load_buffer(event)

        @kb.add("down")
        def history_down(event: KeyPressEvent) -> None:
            """Recall the next submitted line."""
            self.step(FrameInput(text=event.current_buffer.text, history_down=True))
            self._load_buffer(event)

        @kb.add("c-l")
        def clear(event: KeyPressEvent) -> None:
            """Clear the scrollback on Ctrl+L."""
            self.step(
                FrameInput(
                    keyboard=[KeyboardInput(key_code="l", scan_code=SCAN_CODE_L)],
                    ctrl_held=True,
                )
            )

        @kb.add(self.toggle_key)
        def toggle(event: KeyPressEvent) -> None:
            """Open or close the console."""
            self.step(
                FrameInput(
                    keyboard=[
                        KeyboardInput(key_code=self.toggle_key, scan_code=SCAN_CODE_F12)
                    ]
                )
            )

        return kb

    async def run(self) -> None:
        """Interactive loop: read lines and submit them until `exit` is entered."""
        rendering.console.print(
            Panel(
                f"[bold cyan]╭─ FRAME CONSOLE ─╮[/bold cyan]\n\n"
                f"[dim]Toggle key:[/dim] [dim cyan]{self.toggle_key}[/dim cyan]\n"
                f"[dim]History size:[/dim] [dim cyan]{self.app.config.history_size}[/dim cyan]\n"
                f"[dim]Commands:[/dim] [dim cyan]{', '.join(self.app.registry.names())}[/dim cyan]",
                expand=False,
            )
        )

        self.prompt_session = PromptSession(
            message=self.prompt_fragments,
            style=self.style,
            key_bindings=self.get_key_bindings(),
            erase_when_done=True,
        )

        self._start_tick_loop()
        try:
            while not self.app.exit_requested:
                logger.info("Prompting user...")
                user_input = await self.prompt_session.prompt_async()
                if not self.app.open.open:
                    continue
                self.step(FrameInput(text=user_input, submit=True))
        except (KeyboardInterrupt, EOFError):
            pass
        finally:
            self._stop_tick_loop()
            if self._tick_task:
                try:
                    await self._tick_task
                except asyncio.CancelledError:
                    pass
