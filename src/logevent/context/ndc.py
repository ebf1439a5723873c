"""
logevent.context.ndc

Nested diagnostic context (NDC).

Responsibilities:
- Keep a per-execution-context stack of context strings (thread/task safe via contextvars).
- Expose the joined stack through `get()`, the only query a logging event makes.
"""

from __future__ import annotations

from contextvars import ContextVar


class NestedDiagnosticContext:
    """
    Stack of context messages, e.g. push("request 42"), push("user bob").

    Each instance owns its own ContextVar, so separate runtimes never share a stack.
    Mutations rebind an immutable tuple; concurrent contexts never see each other's pushes.
    """

    def __init__(self, *, name: str = "logevent_ndc") -> None:
        self._stack: ContextVar[tuple[str, ...]] = ContextVar(name, default=())

    def push(self, message: str) -> None:
        self._stack.set((*self._stack.get(), str(message)))

    def pop(self) -> str:
        stack = self._stack.get()
        if not stack:
            return ""
        self._stack.set(stack[:-1])
        return stack[-1]

    def peek(self) -> str:
        stack = self._stack.get()
        return stack[-1] if stack else ""

    def get(self) -> str:
        # Full context, outermost first.
        return " ".join(self._stack.get())

    def get_depth(self) -> int:
        return len(self._stack.get())

    def set_max_depth(self, max_depth: int) -> None:
        """
        Trim the stack to at most `max_depth` entries, dropping the most recent ones.
        """

        stack = self._stack.get()
        if max_depth < len(stack):
            self._stack.set(stack[: max(max_depth, 0)])

    def clear(self) -> None:
        self._stack.set(())

    def remove(self) -> None:
        self.clear()


# --- Module Notes -----------------------------------------------------------
# Events read this store at most once (see LoggingEvent.ndc); pushes made after that
# first read are not reflected in the event.
