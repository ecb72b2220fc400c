"""Tests for before/on/after hooks, convention hooks and hook providers."""
import pytest
from safe_fsm import (
    ConventionHooks,
    HookTable,
    InvalidEventError,
    InvalidStateSeedError,
    Phase,
    StateMachine,
    UnresolvedHookError,
)


class Matter(StateMachine):
    """Machine whose hooks live on the subclass."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.temperature = 110
        self.calls = []
        self.transition("freeze", "LIQUID", "SOLID")
        self.transition("condense", "GAS", "LIQUID")

    def before_condense(self):
        self.calls.append("before_condense")
        return self.temperature < 120

    def on_condense(self):
        self.calls.append("on_condense")

    def after_condense(self):
        self.calls.append("after_condense")

    def show_condense(self):
        self.calls.append("show_condense")

    def log_condense(self):
        self.calls.append("log_condense")

    def check_pressure(self):
        self.calls.append("check_pressure")
        return True


class TestExplicitHooks:
    """Test cases for hooks registered with before/on/after."""

    def test_hooks_called_on_each_transition(self):
        """Hooks only fire for their own event."""
        # Arrange
        machine = StateMachine()
        machine.transition("freeze", "LIQUID", "SOLID")
        machine.transition("condense", "GAS", "LIQUID")
        count = 0

        def bump():
            nonlocal count
            count += 1
            return True

        machine.before("freeze", bump)
        machine.on("condense", bump)
        machine.after("condense", bump)
        machine.set_initial("GAS")

        # Act & Assert
        machine.fire("condense")
        assert machine.state == "LIQUID"
        assert count == 2
        machine.fire("freeze")
        assert machine.state == "SOLID"
        assert count == 3

    def test_false_guard_blocks_transition(self):
        """A vetoing guard keeps the state and skips on/after hooks."""
        # Arrange
        machine = StateMachine()
        machine.transition("freeze", "LIQUID", "SOLID")
        calls = []
        machine.before("freeze", lambda: calls.append("before") or False)
        machine.on("freeze", lambda: calls.append("on"))
        machine.after("freeze", lambda: calls.append("after"))
        machine.set_initial("LIQUID")

        # Act
        machine.fire("freeze")

        # Assert
        assert machine.state == "LIQUID"
        assert calls == ["before"]

    def test_every_guard_runs_after_veto(self):
        """Guards after a False one are still evaluated."""
        machine = StateMachine()
        machine.transition("freeze", "LIQUID", "SOLID")
        calls = []
        machine.before("freeze", lambda: calls.append(1) or False)
        machine.before("freeze", lambda: calls.append(2) or True)
        machine.before("freeze", lambda: calls.append(3) or True)
        machine.set_initial("LIQUID")

        machine.fire("freeze")

        assert calls == [1, 2, 3]
        assert machine.state == "LIQUID"

    def test_temperature_guard(self):
        """Condense only succeeds below 120 degrees."""
        # Arrange
        machine = StateMachine()
        machine.transition("freeze", "LIQUID", "SOLID")
        machine.transition("condense", "GAS", "LIQUID")
        temperature = 130
        machine.before("condense", lambda: temperature < 120)
        machine.set_initial("GAS")

        # Act & Assert
        machine.fire("condense")
        assert machine.state == "GAS"
        temperature = 100
        machine.fire("condense")
        assert machine.state == "LIQUID"

    def test_hooks_run_in_registration_order(self):
        machine = StateMachine()
        machine.transition("go", "A", "B")
        order = []
        for i in range(3):
            machine.on("go", lambda i=i: order.append(("on", i)))
            machine.after("go", lambda i=i: order.append(("after", i)))
        machine.set_initial("A")

        machine.fire("go")

        assert order == [("on", 0), ("on", 1), ("on", 2), ("after", 0), ("after", 1), ("after", 2)]

    def test_same_hook_registered_twice_runs_twice(self):
        machine = StateMachine()
        machine.transition("go", "A", "B")
        calls = []
        hook = lambda: calls.append("x")  # noqa: E731
        machine.on("go", hook)
        machine.on("go", hook)
        machine.set_initial("A")

        machine.fire("go")

        assert calls == ["x", "x"]


class TestConventionHooks:
    """Test cases for before_/on_/after_<event> methods and named hooks."""

    def test_convention_guard_blocks(self):
        machine = Matter()
        machine.temperature = 130
        machine.set_initial("GAS")

        machine.fire("condense")

        assert machine.state == "GAS"
        assert machine.calls == ["before_condense"]

    def test_convention_hooks_run_first_in_phase(self):
        """Convention on/after methods run before explicitly registered hooks."""
        # Arrange
        machine = Matter()
        machine.before("condense", "check_pressure")
        machine.on("condense", "show_condense")
        machine.after("condense", "log_condense")
        machine.set_initial("GAS")

        # Act
        machine.condense()

        # Assert
        assert machine.state == "LIQUID"
        assert machine.calls == [
            "before_condense",
            "check_pressure",
            "on_condense",
            "show_condense",
            "after_condense",
            "log_condense",
        ]

    def test_registering_convention_name_is_skipped(self):
        """Naming the convention method explicitly does not run it twice."""
        machine = Matter()
        machine.before("condense", "before_condense")
        machine.on("condense", "on_condense")
        machine.after("condense", "after_condense")
        machine.set_initial("GAS")

        machine.fire("condense")

        assert machine.calls == ["before_condense", "on_condense", "after_condense"]

    def test_unresolved_hook_name_is_ignored(self):
        machine = Matter()
        machine.on("condense", "no_such_method")
        machine.set_initial("GAS")

        machine.fire("condense")

        assert machine.state == "LIQUID"

    def test_shortcut_name_is_not_a_hook(self):
        """Event shortcuts are never registered or bound as hooks."""
        machine = StateMachine()
        machine.transition("after_go", "B", "C")
        machine.transition("go", "A", "B")
        machine.on("go", "after_go")
        machine.set_initial("A")

        machine.fire("go")

        assert machine.state == "B"

    def test_owner_supplies_hooks(self):
        """A separate owner object provides convention and named hooks."""

        class Handlers:
            def __init__(self):
                self.calls = []

            def on_go(self):
                self.calls.append("on_go")

            def announce(self):
                self.calls.append("announce")

        handlers = Handlers()
        machine = StateMachine(owner=handlers)
        machine.transition("go", "A", "B")
        machine.after("go", "announce")
        machine.set_initial("A")

        machine.go()

        assert handlers.calls == ["on_go", "announce"]

    def test_convention_method_added_after_definition(self):
        """Registering a later-added convention method by name makes it run once."""

        class Owner:
            pass

        owner = Owner()
        calls = []
        machine = StateMachine(owner=owner)
        machine.transition("go", "A", "B")
        owner.before_go = lambda: calls.append("before_go") or False
        machine.before("go", "before_go")
        machine.before("go", "before_go")
        machine.set_initial("A")

        machine.fire("go")

        assert calls == ["before_go"]
        assert machine.state == "A"


class TestHookProviders:
    """Test cases for custom HookProvider objects and the building blocks."""

    def test_custom_provider(self):
        class Provider:
            def __init__(self):
                self.calls = []

            def before_hook(self, event):
                return lambda: self.calls.append(("before", event)) or event != "blocked"

            def on_hook(self, event):
                return lambda: self.calls.append(("on", event))

            def after_hook(self, event):
                return None

        provider = Provider()
        machine = StateMachine(hooks=provider)
        machine.transition("go", "A", "B")
        machine.transition("blocked", "B", "C")
        machine.set_initial("A")

        machine.go()
        machine.blocked()

        assert machine.state == "B"
        assert provider.calls == [("before", "go"), ("on", "go"), ("before", "blocked")]

    def test_convention_hooks_bind_once(self):
        """Methods added after bind() are not picked up."""

        class Owner:
            def on_go(self):
                return "on"

        owner = Owner()
        hooks = ConventionHooks(owner)
        hooks.bind("go")

        assert hooks.on_hook("go")() == "on"
        assert hooks.before_hook("go") is None
        assert hooks.after_hook("go") is None

    def test_hook_table_check(self):
        table = HookTable()
        assert table.check("go") is True
        table.add(Phase.BEFORE, "go", lambda: True)
        assert table.check("go") is True
        table.add(Phase.BEFORE, "go", lambda: False)
        assert table.check("go") is False
        assert table.count(Phase.BEFORE, "go") == 2
        assert table.get(Phase.ON, "go") == []


class TestStrictMode:
    """Test cases for StateMachine(strict=True)."""

    def test_strict_unknown_event(self):
        machine = StateMachine(strict=True)
        with pytest.raises(InvalidEventError):
            machine.fire("nothing")

    def test_strict_no_transition_from_state_is_not_an_error(self):
        machine = StateMachine(strict=True)
        machine.transition("go", "A", "B")
        machine.set_initial("B")
        machine.fire("go")
        assert machine.state == "B"

    def test_strict_seed(self):
        machine = StateMachine(strict=True)
        machine.transition("go", "A", "B")
        with pytest.raises(InvalidStateSeedError):
            machine.set_initial("Z")
        machine.set_initial("A")
        with pytest.raises(InvalidStateSeedError):
            machine.set_initial("B")

    def test_strict_unresolved_hook(self):
        machine = StateMachine(strict=True)
        machine.transition("go", "A", "B")
        with pytest.raises(UnresolvedHookError):
            machine.on("go", "missing")

    def test_strict_reserved_event(self):
        machine = StateMachine(strict=True)
        with pytest.raises(InvalidEventError):
            machine.transition("default", "A", "B")
