import logging

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ssm.core.errors import InvalidInput, LaunchError, OutOfRange, SSHClientNotFound, SSMError
from ssm.core.models import DefaultsInput, ProfileInput

logger = logging.getLogger(__name__)

MAIN_MENU = """
1. List connections and connect
2. Add connection
3. Delete connection
4. Edit default settings
5. Exit
Please enter your choice:"""

COLUMNS = [
    ("#", "cyan"),
    ("Name", "green"),
    ("Host", "magenta"),
    ("Port", "yellow"),
    ("Username", "blue"),
    ("SSH Key", "red"),
]


class Menu:
    """
    Interactive text menu over a ConnectionService.

    Args:
        service (ConnectionService): Backing service.
        console (Console): Where output goes. A fresh rich console by default.
        read (callable): Prompt function, ``input`` by default.
    """

    def __init__(self, service, console=None, read=input):
        self.service = service
        self.console = console or Console()
        self.read = read

    def run(self):
        """
        Loops until the user picks Exit or input ends.

        Raises:
            SSHClientNotFound: No SSH client is installed; the caller decides
                whether that ends the program.
        """
        self.print_heading()
        actions = {
            "1": self.list_and_connect,
            "2": self.add_connection,
            "3": self.delete_connection,
            "4": self.edit_defaults,
        }
        while True:
            self.console.print(MAIN_MENU, markup=False)
            try:
                choice = self.read("")
            except (EOFError, KeyboardInterrupt):
                self.console.print("Exiting...")
                return
            if choice == "5":
                self.console.print("Exiting...")
                return
            action = actions.get(choice)
            if action is None:
                self.console.print("Invalid choice. Please try again.")
                continue
            try:
                action()
            except (EOFError, KeyboardInterrupt):
                self.console.print("\nExiting...")
                return

    def print_heading(self):
        self.console.print("[bold magenta]#################[/]")
        self.console.print("[bold magenta]#  [/][bold bright_cyan]SSH Manager[/][bold magenta]  #[/]")
        self.console.print("[bold magenta]#################[/]")

    def render_table(self, profiles):
        table = Table(show_lines=True)
        for header, style in COLUMNS:
            table.add_column(header, style=style, justify="left")
        for i, profile in enumerate(profiles, start=1):
            table.add_row(
                str(i),
                escape(profile.name),
                escape(profile.host),
                str(profile.port),
                escape(profile.username),
                escape(profile.key_path),
            )
        self.console.print(table)

    def list_and_connect(self):
        profiles = self._load_profiles()
        if profiles is None:
            return
        if not profiles:
            self.console.print("No connections found.")
            return

        self.render_table(profiles)
        choice = self.read("Enter the number of the connection to connect, or 'b' to go back: ")
        if choice == "b":
            return

        try:
            status = self.service.connect(choice)
        except (InvalidInput, OutOfRange):
            self.console.print("Invalid selection.")
            return
        except SSHClientNotFound:
            raise
        except LaunchError as e:
            self._error(e)
            return
        except (SSMError, OSError) as e:
            self._error(f"Error loading connections: {e}")
            return

        if status != 0:
            self._error(f"SSH exited with status {status}.")

    def add_connection(self):
        try:
            defaults = self.service.current_defaults()
        except (SSMError, OSError) as e:
            self._error(f"Error loading default settings: {e}")
            return

        self.console.print("Adding a new connection. Press Enter to use default value where applicable.")
        entry = ProfileInput(
            name=self.read("Name: "),
            host=self.read("Host: "),
            port=self.read(f"Port (default: {defaults.port}): "),
            username=self.read(f"Username (default: {defaults.username}): "),
            key_path=self.read(f"SSH Key (default: {defaults.key_path}): "),
        )

        try:
            self.service.add(entry)
        except (SSMError, OSError) as e:
            self._error(f"Error saving connection: {e}")
            return
        self._ok("Connection added successfully!")

    def delete_connection(self):
        profiles = self._load_profiles()
        if profiles is None:
            return
        if not profiles:
            self.console.print("No connections to delete.")
            return

        self.render_table(profiles)
        choice = self.read("Enter the number of the connection you want to delete: ")
        try:
            self.service.delete(choice)
        except (InvalidInput, OutOfRange):
            self.console.print("Invalid number.")
            return
        except (SSMError, OSError) as e:
            self._error(f"Error saving connections: {e}")
            return
        self._ok("Connection deleted successfully!")

    def edit_defaults(self):
        try:
            current = self.service.current_defaults()
        except (SSMError, OSError) as e:
            self._error(f"Error loading default settings: {e}")
            return

        self.console.print("Editing default settings. Press Enter to keep the current value where applicable.")
        changes = DefaultsInput(
            port=self.read(f"Port (current: {current.port}): "),
            username=self.read(f"Username (current: {current.username}): "),
            key_path=self.read(f"SSH Key (current: {current.key_path}): "),
        )

        try:
            _, warnings = self.service.edit_defaults(changes)
        except (SSMError, OSError) as e:
            self._error(f"Error saving default settings: {e}")
            return
        for warning in warnings:
            self.console.print(escape(warning), style="yellow")
        self._ok("Default settings updated successfully!")

    def _load_profiles(self):
        try:
            return self.service.list()
        except (SSMError, OSError) as e:
            self._error(f"Error loading connections: {e}")
            return None

    def _ok(self, message):
        self.console.print(f"[green]\\[+][/] {escape(message)}")

    def _error(self, message):
        logger.debug("Reported to user: %s", message)
        self.console.print(f"[red]\\[-][/] {escape(str(message))}")
