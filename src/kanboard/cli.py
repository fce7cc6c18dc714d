"""Kanboard CLI - inspect and edit a board in memory."""

import json
import logging
import shlex
import sys

import click

from .adapters.json_seed import JsonSeedSource
from .adapters.static_seed import StaticSeedSource
from .config import Config, load_config
from .core.board import Board, Card, check_position
from .core.errors import BoardError
from .modal import ModalState
from .ports.seed_source import SeedSource
from .store import BoardStore

SHELL_HELP = """Commands:
  show                                         Print the board
  add-list NAME                                Append a list
  delete-list LIST_ID                          Remove a list and its cards
  add-card LIST_ID TITLE                       Add a card to the front of a list
  delete-card LIST_ID CARD_ID                  Remove a card
  update-card LIST_IDX CARD_IDX TITLE PRIORITY [CONTENT]
                                               Replace the card at a position
  move-card CARD_ID LIST_ID [INDEX]            Move a card to another list
  open CARD_ID                                 Open the card detail view
  close                                        Close the card detail view
  help                                         Show this help
  quit                                         Leave the shell"""


def _seed_source(seed: str | None, config: Config) -> SeedSource:
    """--seed option, else configured seed file, else the built-in board."""
    path = seed or config.seed_file
    if path:
        return JsonSeedSource(path)
    return StaticSeedSource()


def _open_store(seed: str | None) -> BoardStore:
    config = load_config()
    try:
        lists = _seed_source(seed, config).load()
        return BoardStore(
            lists,
            default_priority=config.default_priority,
            urgent_priority=config.urgent_priority,
        )
    except BoardError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _require(args: list[str], count: int) -> None:
    if len(args) < count:
        raise ValueError(f"expected at least {count} arguments")


def _format_card(card: Card) -> str:
    marker = "!" if card.is_urgent() else " "
    content = f" - {card.content}" if card.content else ""
    return f"[{marker}] {card.id:>4}  {card.title} (p{card.priority}){content}"


def _show_board(board: Board) -> None:
    if not board:
        click.echo("Board is empty.")
        return

    for index, lst in enumerate(board):
        if index:
            click.echo()
        click.echo(f"### {lst.name} (list {lst.id})")
        if not lst.cards:
            click.echo("  (no cards)")
        for card in lst.cards:
            click.echo(f"  {_format_card(card)}")


def _show_priority(cards: tuple[Card, ...]) -> None:
    if not cards:
        click.echo("No priority cards.")
        return
    for card in cards:
        click.echo(_format_card(card))


@click.group()
@click.version_option(package_name="kanboard")
def main():
    """Kanboard - reactive Kanban board store."""
    pass


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--seed", type=click.Path(dir_okay=False), help="Seed board JSON file")
def show(as_json: bool, seed: str | None):
    """Print the board."""
    store = _open_store(seed)
    board = store.get_board()
    if as_json:
        click.echo(json.dumps([lst.to_dict() for lst in board], indent=2))
    else:
        _show_board(board)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--seed", type=click.Path(dir_okay=False), help="Seed board JSON file")
def priority(as_json: bool, seed: str | None):
    """List urgent (priority 1) cards."""
    store = _open_store(seed)
    cards = store.priority_cards
    if as_json:
        click.echo(json.dumps([c.to_dict() for c in cards], indent=2))
    else:
        _show_priority(cards)


class ShellSession:
    """Runs shell commands against a store and echoes stream emissions."""

    def __init__(self, store: BoardStore):
        self.store = store
        self.subscriptions = [
            store.get_priority_cards().subscribe(self._on_priority),
            store.get_modal_state().subscribe(self._on_modal),
        ]

    def close(self) -> None:
        for subscription in self.subscriptions:
            subscription.unsubscribe()

    def _on_priority(self, cards: tuple[Card, ...]) -> None:
        ids = ", ".join(str(c.id) for c in cards) or "none"
        click.echo(f"* priority cards: {ids}")

    def _on_modal(self, state: ModalState) -> None:
        if state.open and state.card is not None:
            click.echo(f"* modal open: {state.card.title} ({state.card.id})")
        else:
            click.echo("* modal closed")

    def run_command(self, line: str) -> bool:
        """Run one command line. Returns False when the session should end."""
        try:
            args = shlex.split(line)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            return True
        if not args:
            return True

        command, rest = args[0], args[1:]
        if command in ("quit", "exit"):
            return False
        try:
            self._dispatch(command, rest)
        except BoardError as e:
            click.echo(f"Error: {e}", err=True)
        except ValueError:
            click.echo(f"Error: bad arguments for {command!r} (try 'help')", err=True)
        return True

    def _dispatch(self, command: str, args: list[str]) -> None:
        store = self.store
        match command:
            case "help":
                click.echo(SHELL_HELP)
            case "show":
                _show_board(store.get_board())
            case "add-list":
                _require(args, 1)
                lst = store.add_list(" ".join(args))
                click.echo(f"Added list {lst.id}")
            case "delete-list":
                _require(args, 1)
                lst = store.delete_list(int(args[0]))
                click.echo(f"Deleted list {lst.name!r}")
            case "add-card":
                _require(args, 2)
                card = store.add_card(int(args[0]), " ".join(args[1:]))
                click.echo(f"Added card {card.id}")
            case "delete-card":
                _require(args, 2)
                card = store.delete_card(int(args[0]), int(args[1]))
                click.echo(f"Deleted card {card.title!r}")
            case "update-card":
                _require(args, 4)
                list_index, card_index = int(args[0]), int(args[1])
                board = store.get_board()
                check_position(board, list_index, card_index)
                # Replacement keeps the id of the card it replaces
                old = board[list_index].cards[card_index]
                new_card = Card(
                    id=old.id,
                    title=args[2],
                    content=" ".join(args[4:]),
                    priority=int(args[3]),
                )
                store.update_card(list_index, card_index, new_card)
                click.echo(f"Updated card {old.id}")
            case "move-card":
                _require(args, 2)
                index = int(args[2]) if len(args) > 2 else 0
                card = store.move_card(int(args[0]), int(args[1]), index)
                click.echo(f"Moved card {card.id}")
            case "open":
                _require(args, 1)
                _, card = store.find_card(int(args[0]))
                store.set_modal_state(True, card)
            case "close":
                store.set_modal_state(False)
            case _:
                click.echo(f"Unknown command {command!r} (try 'help')", err=True)


@main.command()
@click.option("--seed", type=click.Path(dir_okay=False), help="Seed board JSON file")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def shell(seed: str | None, debug: bool):
    """Interactive session over an in-memory board."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    session = ShellSession(_open_store(seed))
    click.echo("Type 'help' for commands, 'quit' to leave.")
    try:
        while True:
            try:
                line = click.prompt("kanboard", default="", show_default=False, prompt_suffix="> ")
            except click.Abort:
                break
            if not session.run_command(line):
                break
    finally:
        session.close()
