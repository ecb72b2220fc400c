"""States of matter -- a StateSafe subclass driven by temperature.

Demonstrates:
- Defining transitions in a subclass constructor
- A convention hook (``on_condense``) that runs without registration
- Named guard, on and after hooks
- Event shortcuts (``matter.condense()``)
- Tracing committed transitions with ``trace_transitions``

Run: python examples/matter.py
"""

from safe_log import LogConfig
from state_safe import StateSafe


class Matter(StateSafe):
    def __init__(self, config: LogConfig | None = None) -> None:
        super().__init__("Example Author", "Matter", "1", "0", "0", config)
        self.temperature = 110

        self.transition("freeze", "LIQUID", "SOLID")
        self.transition("melts", "SOLID", "LIQUID")
        self.transition("evaporate", "LIQUID", "GAS")
        self.transition("condense", "GAS", "LIQUID")
        self.transition("sublimate", "SOLID", "GAS")
        self.transition("deposition", "GAS", "SOLID")

        self.after("freeze", "log_freeze")
        self.after("melts", "log_melts")
        self.after("evaporate", "log_evaporate")
        self.after("condense", "log_condense")

        self.before("condense", "check_condense")
        self.on("condense", "show_condense")

    def on_condense(self) -> None:
        self.safe_msg("On Condense.", "CONDENSE")

    def show_condense(self) -> None:
        self.safe_msg(
            f"Another on {self.transition_name}: {self.from_state} -> {self.next_state}",
            self.transition_name.upper(),
        )

    def check_condense(self) -> bool:
        if self.temperature < 120:
            self.safe_msg("Condense success", "CONDENSE SUCCESS")
            return True
        self.critical_msg(f"Condense failed: temperature {self.temperature} too high.", "CONDENSE FAILED")
        return False

    def log_freeze(self) -> None:
        self.safe_msg("The substance has frozen from liquid to solid.", "FROZEN")

    def log_melts(self) -> None:
        self.safe_msg("The substance has melted from solid to liquid.", "MELTED")

    def log_evaporate(self) -> None:
        self.safe_msg("The substance has evaporated from liquid to gas.", "EVAPORATED")

    def log_condense(self) -> None:
        self.info_msg("The substance has condensed from gas to liquid.", "CONDENSED")


def main() -> None:
    matter = Matter(LogConfig(trace_transitions=True))
    matter.set_initial("GAS")

    matter.temperature = 130
    matter.condense()  # blocked by check_condense
    matter.info_msg(f"Still {matter.state}", "STATE")

    matter.temperature = 100
    matter.condense()
    matter.freeze()
    matter.info_msg(f"States: {', '.join(matter.states())}\nNow: {matter.state}", "SUMMARY")


if __name__ == "__main__":
    main()
