"""Interactive shopping session.

The cart only lives in memory, so every cart operation happens inside
one ``phytoshop shop`` run. Quitting (or end of input) ends the session
and discards the cart.
"""

from __future__ import annotations

from collections.abc import Callable

import click

from phytoshop.application.add_to_cart import AddToCartHandler
from phytoshop.application.checkout import (
    DEFAULT_CITY,
    CheckoutHandler,
    CustomerInfo,
    PaymentMethod,
)
from phytoshop.application.clear_cart import ClearCartHandler
from phytoshop.application.dto import CartDTO
from phytoshop.application.remove_from_cart import RemoveFromCartHandler
from phytoshop.application.session import ShopSession
from phytoshop.application.show_cart import ShowCartHandler
from phytoshop.application.update_quantity import UpdateQuantityHandler
from phytoshop.domain.exceptions import DomainException
from phytoshop.domain.repository.product_repository import ProductRepository
from phytoshop.infrastructure.bootstrap import product_repository, shop_session

HELP_TEXT = """\
Commands:
  add ID [QTY]      add a product to the cart (default 1)
  remove ID         remove a product from the cart
  update ID QTY     set a product's quantity (0 removes it)
  clear             empty the cart
  cart              show the cart
  checkout          place the order
  help              show this help
  quit              end the session"""


def _display_cart(dto: CartDTO) -> None:
    if not dto.lines:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<8} {'Product':<24} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*65}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_id:<8} {line.product_name:<24} {line.quantity:>5} "
            f"{line.unit_price:>12} {line.line_total:>12}"
        )
    click.echo(f"  {'-'*65}")
    click.echo(f"  {'Items':<38} {dto.total_items:>5}")
    click.echo(f"  {'Total':<38} {dto.total_price:>26}")


def _parse_quantity(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise click.UsageError(f"Invalid quantity '{raw}'. Expected a whole number.")


def _expect_args(args: list[str], minimum: int, maximum: int, usage: str) -> None:
    if not minimum <= len(args) <= maximum:
        raise click.UsageError(f"Usage: {usage}")


class _ShopShell:
    """Maps session commands to use-case handlers."""

    def __init__(self, product_repo: ProductRepository, session: ShopSession) -> None:
        self._add = AddToCartHandler(product_repo, session)
        self._remove = RemoveFromCartHandler(session)
        self._update = UpdateQuantityHandler(session)
        self._clear = ClearCartHandler(session)
        self._show = ShowCartHandler(session)
        self._checkout = CheckoutHandler(session)
        self.commands: dict[str, Callable[[list[str]], None]] = {
            "add": self.add,
            "remove": self.remove,
            "update": self.update,
            "clear": self.clear,
            "cart": self.cart,
            "checkout": self.checkout,
            "help": self.help,
        }

    def add(self, args: list[str]) -> None:
        _expect_args(args, 1, 2, "add ID [QTY]")
        quantity = _parse_quantity(args[1]) if len(args) == 2 else 1
        dto = self._add.handle(args[0], quantity)
        click.echo(f"Added. Cart: {dto.total_items} item(s), {dto.total_price}")

    def remove(self, args: list[str]) -> None:
        _expect_args(args, 1, 1, "remove ID")
        dto = self._remove.handle(args[0])
        click.echo(f"Removed. Cart: {dto.total_items} item(s), {dto.total_price}")

    def update(self, args: list[str]) -> None:
        _expect_args(args, 2, 2, "update ID QTY")
        dto = self._update.handle(args[0], _parse_quantity(args[1]))
        click.echo(f"Updated. Cart: {dto.total_items} item(s), {dto.total_price}")

    def clear(self, args: list[str]) -> None:
        _expect_args(args, 0, 0, "clear")
        self._clear.handle()
        click.echo("Cart cleared.")

    def cart(self, args: list[str]) -> None:
        _expect_args(args, 0, 0, "cart")
        _display_cart(self._show.handle())

    def checkout(self, args: list[str]) -> None:
        _expect_args(args, 0, 0, "checkout")
        if not self._show.handle().lines:
            click.echo("Your cart is empty.")
            return

        customer = CustomerInfo(
            name=click.prompt("Full name"),
            phone=click.prompt("Phone"),
            address=click.prompt("Address"),
            city=click.prompt("City", default=DEFAULT_CITY),
        )
        method = click.prompt(
            "Payment method",
            type=click.Choice([m.value for m in PaymentMethod]),
            default=PaymentMethod.MOBILE_MONEY.value,
        )

        receipt = self._checkout.handle(customer, PaymentMethod(method))
        click.echo()
        click.echo("Order confirmed! You will receive a call to arrange delivery.")
        click.echo(f"  {'Subtotal':<20} {receipt.subtotal:>14}")
        click.echo(f"  {'Delivery':<20} {receipt.delivery_fee:>14}")
        click.echo(f"  {'Total to pay':<20} {receipt.total:>14}")
        click.echo(f"  Payment: {receipt.payment_method}, delivery to {receipt.city}")

    def help(self, args: list[str]) -> None:
        click.echo(HELP_TEXT)


@click.command("shop")
def shop() -> None:
    """Start an interactive shopping session."""
    with shop_session() as session:
        shell = _ShopShell(product_repository(), session)
        click.echo("Welcome to Phytoshop. Type 'help' for commands.")

        while True:
            try:
                raw = click.prompt("phytoshop", default="", show_default=False, prompt_suffix="> ")
            except click.Abort:
                click.echo()
                break

            parts = raw.split()
            if not parts:
                continue
            command, args = parts[0].lower(), parts[1:]
            if command in ("quit", "exit"):
                break

            action = shell.commands.get(command)
            if action is None:
                click.echo(f"Error: Unknown command '{command}'. Type 'help' for commands.")
                continue

            try:
                action(args)
            except DomainException as exc:
                click.echo(f"Error: {exc}")
            except click.UsageError as exc:
                click.echo(f"Error: {exc.message}")
            except click.Abort:
                click.echo()
                break

    click.echo("Session ended.")
