"""
Purpose: Scheduler for timed events like question feedback, hazard messages, end-of-run restarts.
Dependencies: None.
Ext Hooks: Pause-aware timers.

Time is virtual: it only moves when the frame driver calls update(dt), which
keeps every delayed action deterministic under test. Events carry a tag
(the session generation) so a restart can drop everything that belongs to
the previous run.
"""

from typing import Callable, Any


class Event:
    def __init__(self, trigger_time: float, callback: Callable, *args, tag: Any = None, **kwargs):
        self.trigger_time = trigger_time
        self.callback = callback
        self.args = args
        self.kwargs = kwargs
        self.tag = tag
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    def __lt__(self, other):
        return self.trigger_time < other.trigger_time


class Scheduler:
    def __init__(self, start_time: float = 0.0):
        self.events = []
        self.current_time = start_time

    def schedule(self, delay: float, callback: Callable, *args, tag: Any = None, **kwargs) -> Event:
        """Schedule a callback after delay seconds."""
        event = Event(self.current_time + delay, callback, *args, tag=tag, **kwargs)
        self.events.append(event)
        self.events.sort()
        return event

    def update(self, delta_seconds: float):
        """Advance current time and execute due events."""
        self.current_time += delta_seconds
        while self.events and self.events[0].trigger_time <= self.current_time:
            event = self.events.pop(0)
            if not event.cancelled:
                event.callback(*event.args, **event.kwargs)

    def cancel_tag(self, tag: Any):
        """Cancel every pending event scheduled with this tag."""
        for event in self.events:
            if event.tag == tag:
                event.cancel()
        self.events = [e for e in self.events if not e.cancelled]

    def pending(self, tag: Any = None):
        return [e for e in self.events if not e.cancelled and (tag is None or e.tag == tag)]
