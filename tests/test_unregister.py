"""Tests for listener unregistration."""

from dataclasses import dataclass

from conftest import Recorder

from emitbus import EventEmitter


class TestOff:
    def test_no_args_clears_everything(self, bus: EventEmitter):
        """off() with no arguments leaves an empty table."""
        bus.on("a, b", Recorder())
        bus.once("c", Recorder())
        bus.on("*", Recorder())
        bus.off()
        assert bus.get_events() == {}

    def test_empty_names_ignore_callback(self, bus: EventEmitter):
        """A falsy name list clears all, even when a callback is given."""
        keep = Recorder()
        bus.on("a", keep)
        bus.on("b", Recorder())
        bus.off("", keep)
        assert bus.get_events() == {}

    def test_all_listeners_of_name(self, bus: EventEmitter):
        bus.on("a", Recorder())
        bus.on("a", Recorder())
        bus.on("b", Recorder())
        bus.off("a")
        assert list(bus.get_events()) == ["b"]

    def test_callback_selectivity(self, bus: EventEmitter):
        """off(name, cb1) leaves cb2 in place."""
        cb1, cb2 = Recorder(), Recorder()
        bus.on("e", cb1)
        bus.on("e", cb2)
        bus.off("e", cb1)
        bus.emit("e", "p")
        assert cb1.calls == []
        assert cb2.calls == ["p"]

    def test_removes_every_duplicate(self, bus: EventEmitter):
        """Matching is by callback, so duplicates all go."""
        rec, other = Recorder(), Recorder()
        bus.on("e", rec)
        bus.on("e", other)
        bus.on("e", rec)
        bus.off("e", rec)
        assert [r.callback for r in bus.get_events()["e"]] == [other]

    def test_last_listener_drops_key(self, bus: EventEmitter):
        rec = Recorder()
        bus.on("e", rec)
        bus.off("e", rec)
        assert "e" not in bus.get_events()

    def test_batch_names(self, bus: EventEmitter):
        rec = Recorder()
        bus.on("a", rec)
        bus.on("b", rec)
        bus.on("c", rec)
        bus.off("a,c", rec)
        assert list(bus.get_events()) == ["b"]

    def test_off_does_not_trim_names(self, bus: EventEmitter):
        rec = Recorder()
        bus.on("a, b", rec)
        bus.off("a, b", rec)
        # " b" does not match "b"
        assert list(bus.get_events()) == ["b"]

    def test_unknown_pairs_are_noop(self, bus: EventEmitter):
        rec = Recorder()
        bus.on("e", rec)
        bus.off("missing", rec)
        bus.off("e", Recorder())
        bus.off("missing")
        assert len(bus.get_events()["e"]) == 1

    def test_bound_methods_match_by_instance(self, bus: EventEmitter):
        """Separately fetched bound methods of one instance compare equal."""

        class Sink:
            def __init__(self) -> None:
                self.calls: list[int] = []

            def take(self, payload: int) -> None:
                self.calls.append(payload)

        first, second = Sink(), Sink()
        bus.on("e", first.take)
        bus.on("e", second.take)
        bus.off("e", first.take)
        bus.emit("e", 1)
        assert first.calls == []
        assert second.calls == [1]

    def test_off_then_emit_is_silent(self, bus: EventEmitter):
        rec = Recorder()
        bus.on("e", rec)
        bus.off("e")
        bus.emit("e", 1)
        assert rec.calls == []

    def test_equal_but_distinct_callables_kept_apart(self, bus: EventEmitter):
        """Matching is by identity, not by ``==``."""

        @dataclass
        class Tagged:
            tag: str

            def __call__(self, payload: int) -> None: ...

        a, b = Tagged("x"), Tagged("x")
        assert a == b
        bus.on("e", a)
        bus.on("e", b)
        bus.off("e", a)
        [remaining] = bus.get_events()["e"]
        assert remaining.callback is b

    def test_bound_method_of_other_instance_not_removed(self, bus: EventEmitter):
        @dataclass
        class Sink:
            tag: str

            def take(self, payload: int) -> None: ...

        first, twin = Sink("x"), Sink("x")
        bus.on("e", first.take)
        bus.off("e", twin.take)
        assert len(bus.get_events()["e"]) == 1
        bus.off("e", first.take)
        assert bus.get_events() == {}
