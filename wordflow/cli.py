import asyncio
import logging
from typing import Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from wordflow.config import EngineConfig
from wordflow.game.engine import WordEngine
from wordflow.game.models import Level, LevelProgress, LoadOutcome
from wordflow.game.rules import MESSAGES, GuessVerdict
from wordflow.game.session import GameSession
from wordflow.sources.adapters import StaticWordSource
from wordflow.sources.factory import create_source
from wordflow.words.lists import FALLBACK_WORDS

app = typer.Typer(help="WordFlow: find every word hidden in a handful of letters.")
console = Console()
err_console = Console(stderr=True)

@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )

def _load_engine(url: Optional[str], file: Optional[str], offline: bool) -> WordEngine:
    config = EngineConfig.from_env(word_list_url=url, word_list_path=file)
    source = StaticWordSource(FALLBACK_WORDS) if offline else create_source(config)
    engine = WordEngine(source, config)
    outcome = asyncio.run(engine.init())
    if outcome == LoadOutcome.FALLBACK:
        err_console.print("[yellow]Word list unavailable, playing with the offline list.[/yellow]")
    return engine

@app.command()
def level(
    length: int = typer.Option(6, "--length", "-n", help="Root word length (5-7)"),
    as_json: bool = typer.Option(False, "--json", help="Print the level as JSON"),
    url: Optional[str] = typer.Option(None, help="Word list URL"),
    file: Optional[str] = typer.Option(None, help="Local word list, one word per line"),
    offline: bool = typer.Option(False, help="Use the built-in word list"),
):
    """
    Generates a single level and prints its letters and words.
    """
    engine = _load_engine(url, file, offline)
    lvl = engine.generate_level(length)
    if as_json:
        typer.echo(lvl.model_dump_json(indent=2))
        return
    _print_level(lvl)

@app.command()
def check(
    word: str = typer.Argument(..., help="Word to look up"),
    url: Optional[str] = typer.Option(None, help="Word list URL"),
    file: Optional[str] = typer.Option(None, help="Local word list, one word per line"),
    offline: bool = typer.Option(False, help="Use the built-in word list"),
):
    """
    Reports whether a word is in the dictionary.
    """
    engine = _load_engine(url, file, offline)
    if engine.is_valid_word(word):
        console.print(f"[green]{word.upper()} is a valid word[/green]")
    else:
        console.print(f"[red]{word.upper()} is not in the dictionary[/red]")
        raise typer.Exit(code=1)

@app.command()
def play(
    length: int = typer.Option(6, "--length", "-n", help="Root word length of the first level"),
    url: Optional[str] = typer.Option(None, help="Word list URL"),
    file: Optional[str] = typer.Option(None, help="Local word list, one word per line"),
    offline: bool = typer.Option(False, help="Use the built-in word list"),
):
    """
    Plays levels in the terminal. Type :giveup, :next or :quit at the prompt.
    """
    engine = _load_engine(url, file, offline)
    session = GameSession(engine)
    progress = session.start(length)

    while True:
        _print_board(session.level_number, progress)
        try:
            guess = console.input("[bold cyan]Guess[/bold cyan] > ").strip()
        except EOFError:
            break

        if guess == ":quit":
            break
        if guess == ":giveup":
            session.give_up()
            console.print("[yellow]Words revealed![/yellow]")
            _print_board(session.level_number, progress)
            progress = session.next_level()
            continue
        if guess == ":next":
            progress = session.next_level()
            continue

        verdict = session.submit(guess)
        if verdict == GuessVerdict.FOUND:
            console.print(f"[green]{MESSAGES[verdict]}[/green]")
        elif MESSAGES[verdict]:
            console.print(f"[red]{MESSAGES[verdict]}[/red]")

        if progress.is_complete:
            console.print(f"[bold green]Level {session.level_number} complete![/bold green]")
            progress = session.next_level()

def _print_level(lvl: Level):
    table = Table(title=f"Letters: {' '.join(lvl.display_letters)}")
    table.add_column("Length", justify="right")
    table.add_column("Words", style="cyan")
    for n, words in lvl.words_by_length().items():
        table.add_row(str(n), ", ".join(words))
    console.print(table)

def _print_board(level_number: int, progress: LevelProgress):
    lvl = progress.level
    table = Table(title=f"Level {level_number}  {' '.join(lvl.display_letters)}")
    table.add_column("Length", justify="right")
    table.add_column("Words")
    table.add_column("Found", justify="right")
    for n, words in lvl.words_by_length().items():
        shown = [w.upper() if w in progress.found_words else "•" * len(w) for w in words]
        found = sum(1 for w in words if w in progress.found_words)
        table.add_row(f"{n} letters", "  ".join(shown), f"{found}/{len(words)}")
    console.print(table)

if __name__ == "__main__":
    app()
