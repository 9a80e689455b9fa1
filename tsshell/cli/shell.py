"""
Interactive Shell Mode.

REPL front end: reads one line at a time from the Rich console and hands
it to the CommandDispatcher. Ctrl-C, Ctrl-D and the exit commands all end
the session through the same shutdown hook.
"""

from rich.console import Console
from rich.markup import escape

from tsshell.cli.client import TransportClient
from tsshell.cli.dispatcher import CommandDispatcher
from tsshell.cli.render import ResultRenderer
from tsshell.cli.session import SessionState
from tsshell.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


class InteractiveShell:
    """
    Interactive shell for database commands.

    Usage:
        shell = InteractiveShell(TransportClient("127.0.0.1", 8086))
        shell.run()
    """

    def __init__(
        self,
        client: TransportClient,
        session: SessionState | None = None,
        console: Console | None = None,
        prefix: str = "> ",
        title: str = "",
    ) -> None:
        self.running = False
        self.client = client
        self.session = session or SessionState()
        self.console = console or Console()
        self.prefix = prefix
        self.title = title
        self.dispatcher = CommandDispatcher(
            session=self.session,
            client=client,
            renderer=ResultRenderer(self.console),
            console=self.console,
            on_shutdown=self.shutdown,
        )
        # Credentials supplied at startup come in through the session.
        client.set_credentials(self.session.username, self.session.password)

    def shutdown(self) -> None:
        """Stop reading lines. Called once by exit commands or on interrupt."""
        if self.running:
            log_with_source(logger, "shell", "info", "Shell shutting down")
        self.running = False

    def run(self) -> None:
        """Run the read-dispatch loop until shutdown."""
        self.running = True

        if self.title:
            self.console.print(f"[bold]{self.title}[/bold]")
        self.console.print("Type [cyan]help[/cyan] for available commands, [cyan]quit[/cyan] to exit.")

        try:
            while self.running:
                try:
                    line = self.console.input(self.prefix).strip()
                    self.dispatcher.execute(line)
                except (KeyboardInterrupt, EOFError):
                    # Ctrl-C at the prompt, mid-request or at the password prompt
                    self.console.print()
                    self.shutdown()
                except Exception as e:
                    log_with_source(logger, "shell", "error", "Unexpected error", error=str(e))
                    self.console.print(f"[red]Error: {escape(str(e))}[/red]")
        finally:
            self.client.close()

        self.console.print("[dim]Goodbye![/dim]")
