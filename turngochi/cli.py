import random
from pathlib import Path

from rich.console import Console, Group
from rich.panel import Panel
from rich.progress import Progress, BarColumn, TextColumn
from rich.prompt import IntPrompt, Prompt
from rich.text import Text

from .attributes import Stat
from .config import SAVE_FILE, DEFAULT_NAME, ATTRIBUTE_MAX
from .economy import SHOP_ITEMS
from .minigames import GAMES
from .persistence import load_record, save_record
from .simulation import Action, Interaction, PetState, Simulation

console = Console()
err_console = Console(stderr=True)

MENU = [
    (Action.FEED, "Feed"), (Action.PLAY, "Play"), (Action.SLEEP, "Sleep"), (Action.CLEAN, "Clean"),
    (Action.STATUS, "Status"), (Action.SHOP, "Shop"), (Action.QUIT, "Quit"),
]


# Per-stat (low, high) cut-offs for the red/yellow/green bar colors.
BAR_THRESHOLDS = {
    Stat.HUNGER: (20, 70),
    Stat.HAPPINESS: (20, 70),
    Stat.ENERGY: (25, 75),
    Stat.CLEANLINESS: (30, 80),
    Stat.HEALTH: (25, 80),
}


# --- Helper Function create_progress_bar ---
def create_progress_bar(label, completed, total, low_color, mid_color, high_color, low_threshold, high_threshold):
    progress = Progress(TextColumn(f"{label}:{' '*(12-len(label))}"), BarColumn(bar_width=20), TextColumn("{task.completed:>3.0f}"))
    style = mid_color
    if completed <= low_threshold: style = low_color
    elif completed >= high_threshold: style = high_color
    task_id = progress.add_task(label.lower(), total=total, completed=completed); progress.update(task_id, style=style); return progress


def status_panel(name, status):
    bars = [create_progress_bar(stat.label, status[stat.label], ATTRIBUTE_MAX, "red", "yellow", "green", *BAR_THRESHOLDS[stat]) for stat in Stat]
    footer = Text(f"Money: {status['Money']} coins", style="bold yellow")
    return Panel(Group(*bars, footer), title=f"{name} - Age: {status['Age']}", border_style="blue")


class ConsoleInteraction:
    """Terminal side of the game: menus out, choices in."""

    def __init__(self, console: Console = console):
        self.console = console

    def show_options(self):
        self.console.print("\n[bold]Options:[/bold]")
        for action, label in MENU: self.console.print(f"  [cyan]{action.value}[/cyan]. {label}")

    def choose_action(self) -> str:
        self.show_options()
        try: return Prompt.ask("Choose an option", console=self.console)
        except (EOFError, KeyboardInterrupt):
            self.console.print("\n[bold yellow]Quitting...[/bold yellow]"); return Action.QUIT.value

    def choose_game(self) -> str:
        self.console.print("[cyan]Choose a game:[/cyan]")
        for kind, game in GAMES.items(): self.console.print(f"  [cyan]{kind.value}[/cyan]. {game.title}")
        return Prompt.ask("Game", console=self.console)

    def answer(self, prompt: str) -> int:
        return IntPrompt.ask(prompt, console=self.console)

    def choose_purchase(self) -> str:
        self.console.print("\n[bold]Shop:[/bold]")
        for item, (label, price, *_) in SHOP_ITEMS.items():
            self.console.print(f"  [cyan]{item.value}[/cyan]. {label} ({price} coins)")
        return Prompt.ask("Choose an option", console=self.console)

    def ask_name(self) -> str:
        name = Prompt.ask("[bold cyan]Enter a name for your pet[/bold cyan]", console=self.console, default="", show_default=False)
        return name.strip() or DEFAULT_NAME


# --- Save/Load Functions ---
def load_pet(name, path=SAVE_FILE, out=console, err=err_console):
    result = load_record(path)
    if not result.ok:
        err.print(f"[bold red]Error loading state:[/bold red] {result.error}")
        out.print("[yellow]Starting a new pet.[/yellow]"); return PetState(name)
    pet = PetState.from_record(result.record)
    out.print(f"[bold green]Loading saved state for '{pet.name}'...[/bold green]")
    if not pet.is_alive():
        out.print(f"[bold red]{pet.name} was found dead...[/bold red] [yellow]Starting a new pet.[/yellow]")
        return PetState(name)
    return pet


def save_pet(pet, path=SAVE_FILE, err=err_console):
    result = save_record(pet.to_record(), path)
    if not result.ok: err.print(f"[bold red]Error saving state:[/bold red] {result.error}")
    return result.ok


def run(path: Path = SAVE_FILE, interaction: Interaction | None = None, rng: random.Random | None = None, out=None, err=err_console):
    """Play until the player quits or the pet dies, then save. Always returns 0."""
    interaction = interaction or ConsoleInteraction(out or console)
    out = out or getattr(interaction, "console", console)
    pet = load_pet(interaction.ask_name(), path, out, err)
    sim = Simulation(pet, rng)
    out.print(f"[bold green]Welcome to Turngochi, {pet.name}![/bold green]")

    while True:
        try: result = sim.play_turn(Action.parse(interaction.choose_action()), interaction)
        except (EOFError, KeyboardInterrupt):
            out.print("\n[bold yellow]Quitting on user interrupt...[/bold yellow]"); break
        if result.status is not None: out.print(status_panel(pet.name, result.status))
        for message in result.messages: out.print(message)
        if result.finished: break
        if result.event is not None: out.print(f"[dim]Age: {result.age}[/dim]")

    if save_pet(pet, path, err): out.print(f"[bold blue]{pet.name} state saved.[/bold blue]")
    return 0


def main():
    return run()
