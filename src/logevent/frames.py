"""
logevent.frames

Call-stack capture primitive.

Responsibilities:
- Define the frame record the call-site resolver consumes.
- Turn the live interpreter stack into frame records (innermost first).

Note:
- A record's file/line is the line currently executing in that frame, so the call
  site into a frame is the file/line of the frame right outside it.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from types import FrameType


@dataclass(frozen=True, slots=True)
class StackFrame:
    # Every field is optional: frames may lack any piece of metadata.
    function: str | None = None
    file: str | None = None
    line: int | None = None
    class_name: str | None = None
    # Direct base class of `class_name`, when the class could be resolved.
    parent_class: str | None = None


def capture_stack(skip: int = 0) -> list[StackFrame]:
    """
    Snapshot of the current call stack, innermost (most recent) frame first.

    The caller of `capture_stack` is the first record; `skip` drops that many more.
    Returns an empty list when the interpreter exposes no frame objects.
    """

    frame = inspect.currentframe()
    if frame is None:
        return []
    frames: list[StackFrame] = []
    try:
        current = frame.f_back
        for _ in range(skip):
            if current is None:
                break
            current = current.f_back
        while current is not None:
            frames.append(_to_record(current))
            current = current.f_back
    finally:
        # Frame objects hold their locals; drop references to avoid cycles.
        del frame
    return frames


def _to_record(frame: FrameType) -> StackFrame:
    code = frame.f_code
    class_name = _class_from_qualname(getattr(code, "co_qualname", None))
    owner = _owner_class(frame)
    if class_name is None and owner is not None:
        class_name = owner.__name__
    return StackFrame(
        function=code.co_name,
        file=code.co_filename,
        line=frame.f_lineno or 0,
        class_name=class_name,
        parent_class=_parent_of(owner, class_name),
    )


def _class_from_qualname(qualname: str | None) -> str | None:
    # "Outer.Inner.method" -> "Inner"; "func.<locals>.helper" -> None
    if not qualname or "." not in qualname:
        return None
    owner = qualname.rsplit(".", 1)[0].rsplit(".", 1)[-1]
    if owner.startswith("<"):
        return None
    return owner


def _owner_class(frame: FrameType) -> type | None:
    if frame.f_code.co_argcount == 0:
        return None
    first = frame.f_code.co_varnames[0]
    if first not in ("self", "cls"):
        return None
    obj = frame.f_locals.get(first)
    if obj is None:
        return None
    return obj if isinstance(obj, type) else type(obj)


def _parent_of(owner: type | None, class_name: str | None) -> str | None:
    if owner is None or class_name is None:
        return None
    # The defining class may be a base of the runtime type (inherited methods).
    for klass in owner.__mro__:
        if klass.__name__ == class_name:
            bases = klass.__mro__[1:]
            if bases and bases[0] is not object:
                return bases[0].__name__
            return None
    return None


# --- Module Notes -----------------------------------------------------------
# Capture is synchronous and bounded by the real call depth; callers keep it lazy
# because most events never ask for their location.
