from __future__ import annotations

from typing import Callable, Optional
from colorama import Fore, Style, init as colorama_init

from .errors import SchedulerError
from .session import SchedulingSession, SessionConfig, create_session
from .utils import format_listing


MENU = {
    "1": "priority",
    "2": "sjf",
    "3": "fcfs",
}
EXIT_CHOICE = "4"


class ManualTerminal:
    def __init__(self, input_fn: Callable[[str], str] = input, config: SessionConfig | None = None) -> None:
        colorama_init(autoreset=True)
        self._input = input_fn
        self.config = config or SessionConfig()
        self.session: Optional[SchedulingSession] = None

    def prompt(self) -> None:
        try:
            count = self._ask_int("Enter number of processes: ", minimum=1)
            self.read_processes(count)
            self.display()
            while True:
                self._menu()
                if not self.handle_choice(self._input(Fore.GREEN + "Enter choice: ")):
                    break
        except (EOFError, KeyboardInterrupt):
            print()

    def read_processes(self, count: int) -> SchedulingSession:
        self.session = create_session(count, config=self.config)
        print(f"\nEnter details for {count} processes:\n")
        for i in range(1, count + 1):
            print(Fore.CYAN + f"Process {i}:")
            name = self._ask_text("  Name             : ")
            size = self._ask_int("  Size (KB)        : ", minimum=0)
            burst = self._ask_int("  Burst time (ms)  : ", minimum=0)
            priority = self._ask_int(f"  Priority (1-{count}) : ")
            print("-" * 40)
            self.session.insert(i, name, size, burst, priority)
        return self.session

    def handle_choice(self, raw: str) -> bool:
        """Run one menu choice. Returns False when the user asked to exit."""
        choice = raw.strip()
        if choice == EXIT_CHOICE:
            print(Fore.CYAN + "Exiting...")
            return False
        policy_name = MENU.get(choice)
        if policy_name is None:
            print(Fore.YELLOW + "Invalid choice! Please try again.")
            return True
        if self.session is None:
            print(Fore.YELLOW + "No processes entered yet.")
            return True
        try:
            self.session.apply_policy(policy_name)
        except SchedulerError as e:
            print(Fore.RED + f"Error: {e}")
            return True
        print(Style.BRIGHT + f"\nAfter {self.session.policies.get(policy_name).label} Scheduling:")
        self.display()
        return True

    def display(self) -> None:
        print()
        print(format_listing(
            self.session.snapshot(),
            width=self.config.listing_width,
            name_width=self.config.name_width,
        ))
        print()

    def _menu(self) -> None:
        print(Fore.CYAN + "\nCPU SCHEDULING MENU")
        print("1. Priority Scheduling")
        print("2. Shortest Job First (SJF)")
        print("3. First Come First Serve (FCFS)")
        print("4. Exit")

    def _ask_text(self, label: str) -> str:
        while True:
            value = self._input(label).strip()
            if value:
                return value
            print(Fore.RED + "Name cannot be empty")

    def _ask_int(self, label: str, minimum: Optional[int] = None) -> int:
        while True:
            raw = self._input(label)
            try:
                value = int(raw.strip())
            except ValueError:
                print(Fore.RED + "Invalid numeric value")
                continue
            if minimum is not None and value < minimum:
                print(Fore.RED + f"Value must be at least {minimum}")
                continue
            return value


def main() -> None:
    ManualTerminal().prompt()


if __name__ == "__main__":
    main()
