"""Live filter exploration session.

A :class:`FilterSession` owns one video source and one display window for its
whole lifetime and drives the capture, validate, filter, display and input
loop for a single :class:`~cvscope.filters.FilterSpec`.
"""

from __future__ import annotations

__all__ = ("FilterSession", "SessionState")

import contextlib
import enum
import logging
import sys
from typing import TYPE_CHECKING, TextIO

from typing_extensions import Self

from . import constants
from .core import DEFAULT_KEYMAP, Command, EnumCycler, Language, ParameterStore, Window, open_video_source, translate_key
from .core.capture import is_empty_frame, read_frame

if TYPE_CHECKING:
    from collections.abc import Callable

    import cv2 as cv

    from .core.commands import Keymap
    from .filters import FilterSpec
    from .models import FilterConfig, OptionEntry


class SessionState(enum.Enum):
    """Playback state of a session."""

    RUNNING = "running"
    PAUSED = "paused"
    TERMINATED = "terminated"


class FilterSession:
    """Run one filter against a live video source until the operator quits.

    While paused the unfiltered frame is displayed; capture and parameter
    validation continue so trackbar changes are still tracked.
    """

    def __init__(
        self: Self,
        spec: FilterSpec,
        source: int | str = constants.DEFAULT_SOURCE,
        *,
        keymap: Keymap = DEFAULT_KEYMAP,
        wait_ms: int = constants.WAIT_KEY_DELAY_MS,
        capture_factory: Callable[[int | str], cv.VideoCapture] = open_video_source,
        window_factory: Callable[[str], Window] = Window,
        stream: TextIO | None = None,
    ) -> None:
        """Prepare a session; nothing is opened until :meth:`run`.

        Args:
            spec: Filter to explore.
            source: Camera device index or video path/URL.
            keymap: Key code to command mapping.
            wait_ms: Key poll timeout per iteration, which also paces the loop.
            capture_factory: Opens the video source.
            window_factory: Creates the display window from its name.
            stream: Destination for code fragments. Defaults to ``sys.stdout``.
        """
        self.spec = spec
        self.source = source
        self.keymap = keymap
        self.wait_ms = wait_ms
        self._capture_factory = capture_factory
        self._window_factory = window_factory
        self._stream = stream

        self.state = SessionState.RUNNING
        self.cycler: EnumCycler | None = EnumCycler(spec.options) if spec.options else None
        self.config: FilterConfig | None = None
        self.capture: cv.VideoCapture | None = None
        self.window: Window | None = None
        self.store: ParameterStore | None = None

        self._handlers: dict[Command, Callable[[], None]] = {
            Command.CYCLE_PREV: self.cycle_prev,
            Command.CYCLE_NEXT: self.cycle_next,
            Command.EMIT_PRIMARY_CODE: self.emit_primary_code,
            Command.EMIT_SECONDARY_CODE: self.emit_secondary_code,
            Command.TOGGLE_PAUSE: self.toggle_pause,
            Command.TERMINATE: self.terminate,
        }
        self._instance_logger: logging.Logger = (
            logging.getLogger(__name__).getChild(self.__class__.__name__).getChild(str(id(self)))
        )

    @property
    def paused(self: Self) -> bool:
        """``True`` while the unfiltered frame is displayed."""
        return self.state is SessionState.PAUSED

    @property
    def option_index(self: Self) -> int:
        """Index of the current discrete option, 0 for filters without one."""
        return self.cycler.index if self.cycler is not None else 0

    def current_option(self: Self) -> OptionEntry | None:
        """Return the current discrete option, if the filter has one."""
        return self.cycler.current() if self.cycler is not None else None

    def window_title(self: Self) -> str:
        """Build the window title, marked while paused."""
        title = self.spec.window_title(self.current_option())
        if self.paused:
            return constants.PAUSED_MARKER + title
        return title

    def run(self: Self) -> SessionState:
        """Open the source and window, then loop until terminated.

        The capture and the window are released exactly once on every exit
        path, including exceptions raised by OpenCV.

        Returns:
            SessionState: Always :attr:`SessionState.TERMINATED`.

        Raises:
            VideoSourceError: If the video source cannot be opened.
        """
        with contextlib.ExitStack() as stack:
            self.capture = self._capture_factory(self.source)
            stack.callback(self.capture.release)

            self.window = self._window_factory(self.spec.title)
            stack.callback(self.window.close)
            self.window.set_title(self.window_title())

            self.store = ParameterStore(self.spec, self.window)

            self._instance_logger.info("Start reading video: %s", self.source)
            while self.state is not SessionState.TERMINATED:
                self.step()
        return self.state

    def step(self: Self) -> None:
        """Run a single loop iteration."""
        if self.capture is None or self.window is None or self.store is None:
            msg = "FilterSession.step() requires run() to have opened the source and window."
            raise RuntimeError(msg)

        ok, frame = read_frame(self.capture)
        if not ok:
            self._instance_logger.error("Device closed: %s", self.source)
            self.terminate()
            return
        if frame is None or is_empty_frame(frame):
            return

        self.config = self.store.resolve(self.option_index)
        processed = self.spec.apply(frame, self.config)
        self.window.show(frame if self.paused else processed)

        command = translate_key(self.window.wait_key(self.wait_ms), self.keymap)
        if command is not None:
            self.dispatch(command)

    def dispatch(self: Self, command: Command) -> None:
        """Invoke the handler bound to ``command``."""
        self._instance_logger.debug("Dispatching %s.", command.name)
        self._handlers[command]()

    def cycle_prev(self: Self) -> None:
        """Select the previous discrete option and retitle the window."""
        if self.cycler is None:
            return
        self.cycler.prev()
        self._retitle()

    def cycle_next(self: Self) -> None:
        """Select the next discrete option and retitle the window."""
        if self.cycler is None:
            return
        self.cycler.next()
        self._retitle()

    def emit_primary_code(self: Self) -> None:
        """Print the current call as Python code."""
        self._emit(Language.PYTHON)

    def emit_secondary_code(self: Self) -> None:
        """Print the Go placeholder fragment."""
        self._emit(Language.GO)

    def toggle_pause(self: Self) -> None:
        """Switch between showing the filtered and the original frame."""
        if self.state is SessionState.TERMINATED:
            return
        self.state = SessionState.RUNNING if self.paused else SessionState.PAUSED
        self._retitle()

    def terminate(self: Self) -> None:
        """End the loop after the current iteration."""
        self.state = SessionState.TERMINATED

    def _emit(self: Self, language: Language) -> None:
        if self.config is None:
            return
        fragment = self.spec.code_fragment(language, self.config, self.current_option())
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(fragment)
        stream.flush()

    def _retitle(self: Self) -> None:
        if self.window is not None:
            self.window.set_title(self.window_title())
