from typing import Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

from ..api.create_image import CreateImageResponse
from ..api.embedding import EmbeddingResponse


class UI:
    """Terminal output for the llm-sdk command line, using Rich"""

    def __init__(self, console: Console = None):
        self.console = console or Console()
        self.pt_style = Style.from_dict({
            'prompt': 'ansiyellow bold',
        })
        self._session = None

    def show_msg(self, title: str, content: str, color: str = "white"):
        self.console.print(Panel(escape(content), title=f"[bold]{title}[/]", border_style=color, padding=(1, 2)))

    def show_error(self, message: str):
        self.console.print(f"[bold red]✗ {escape(message)}[/]")

    async def get_input(self, label: str = "YOU") -> str:
        """Read one line; EOF is treated as /exit."""
        if self._session is None:
            self._session = PromptSession(history=InMemoryHistory())

        self.console.print(f"[bold bright_yellow]◆ {label}[/]")
        try:
            return await self._session.prompt_async(
                [('class:prompt', ' ╰─> ')],
                style=self.pt_style,
            )
        except EOFError:
            return "/exit"

    def show_reply(self, title: str, content: str):
        self.console.print(Rule(f"[bold bright_cyan]{title}[/bold bright_cyan]", style="bright_blue"))
        self.console.print(Markdown(content or "_(empty response)_"))
        self.console.print(Rule(style="dim bright_blue"))

    def show_images(self, res: CreateImageResponse):
        table = Table(show_header=True, header_style="bold magenta", border_style="dim white", expand=True)
        table.add_column("#", style="cyan", justify="center", width=4)
        table.add_column("Image", style="green")
        table.add_column("Revised prompt", style="dim white")

        for idx, image in enumerate(res.data, 1):
            location = image.url or (f"<{len(image.b64_json)} base64 chars>" if image.b64_json else "-")
            table.add_row(str(idx), location, image.revised_prompt or "")

        self.console.print(table)

    def show_embeddings(self, inputs: Sequence[str], res: EmbeddingResponse):
        table = Table(show_header=True, header_style="bold magenta", border_style="dim white")
        table.add_column("#", style="cyan", justify="center", width=4)
        table.add_column("Input", style="green")
        table.add_column("Dimensions", style="yellow", justify="right")

        for item in res.data:
            text = inputs[item.index] if item.index < len(inputs) else ""
            preview = text[:50] + "..." if len(text) > 50 else text
            table.add_row(str(item.index), preview, str(item.dimensions))

        self.console.print(table)
        self.console.print(f"[dim]model={res.model} prompt_tokens={res.usage.prompt_tokens} total_tokens={res.usage.total_tokens}[/]")
