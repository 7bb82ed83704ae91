import logging
import os
import sys
from collections import Counter

from .coin import STERLING, parse_coin
from .commands import CommandError, parse_command
from .config import ConfigError, ConfigLoader
from .machine import Machine
from .render import render_currency

logger = logging.getLogger(__name__)

BALANCE_OPTION = 'balance'
INSERT_COIN_OPTION = 'insert'
PURCHASE_OPTION = 'purchase'
STOCK_OPTION = 'stock'
CHANGE_OPTION = 'change'
RELOAD_OPTION = 'reload'
HELP_OPTION = 'help'
CLEAR_OPTION = 'clear'
EXIT_OPTION = 'exit'


class CLI:
    """
    Text interface to a Machine built from the initial config.

    `run` prints the introduction and then reads one command per line,
    handing it to the matching handler, until the user exits.
    """

    def __init__(self, config_loader=None, denominations=STERLING):
        self.config_loader = config_loader or ConfigLoader(denominations=denominations)
        self.denominations = denominations
        self.machine = Machine(
            products=self.config_loader.initial_products(),
            change=self.config_loader.initial_change(),
            denominations=denominations,
        )

    def run(self):
        self.clear_screen()
        self.output_interface()

        try:
            while True:
                print("> ", end="")
                try:
                    line = input()
                except EOFError:
                    print()
                    break

                if not line.strip():
                    continue

                try:
                    command = parse_command(line)
                except CommandError as e:
                    logger.debug("Rejected input %r: %s", line, e)
                    self.output_invalid_input()
                    continue

                if command.name == EXIT_OPTION:
                    break
                self.dispatch(command)
        except KeyboardInterrupt:
            print("\nExiting")

    def dispatch(self, command):
        name = command.name
        option = command.argument

        if name == BALANCE_OPTION:
            self.output_balance()
        elif name == INSERT_COIN_OPTION:
            self.insert_coin(option)
        elif name == STOCK_OPTION:
            self.output_stock()
        elif name == CHANGE_OPTION:
            self.output_change()
        elif name == PURCHASE_OPTION:
            self.purchase_product(option)
        elif name == RELOAD_OPTION:
            self.reload_machine(option)
        elif name == HELP_OPTION:
            self.output_options()
        elif name == CLEAR_OPTION:
            self.clear_screen()
            self.output_interface()
        else:
            self.output_invalid_input()

    # -----------------------------
    # Interface output
    # -----------------------------
    def clear_screen(self):
        os.system('cls' if os.name == 'nt' else 'clear')

    def output_interface(self):
        print("Welcome to Vending Machine")
        print()
        self.output_stock()
        print()
        self.output_change()
        print()
        self.output_options()

    def output_invalid_input(self):
        self.output_error("Invalid Input")

    def output_error(self, error):
        print(f"ERROR: {error}")

    def options(self):
        coin_names = ", ".join(self.denominations.labels)
        return {
            BALANCE_OPTION: "Output Balance",
            f"{INSERT_COIN_OPTION} <x>": f"Insert Coin (options: {coin_names})",
            STOCK_OPTION: "Display current stock",
            CHANGE_OPTION: "Display current change in machine",
            f"{PURCHASE_OPTION} <x>": "Attempt to purchase a product (case insensitive)",
            f"{RELOAD_OPTION} <x>": "Reload vending machine back to initial values (options: products, change)",
            HELP_OPTION: "Display these options",
            CLEAR_OPTION: "Clear history",
            EXIT_OPTION: "Close CLI",
        }

    def output_options(self):
        print("Available Options")
        print("=================")

        options = self.options()
        # +1 for the colon after the longest option
        width = max(len(option) for option in options) + 1
        for option, description in options.items():
            print(f"{option + ':':<{width}} {description}")

    def output_balance(self):
        print(f"Current Balance: {render_currency(self.machine.balance)}")

    def output_stock(self):
        print("Current Stock")
        print("=============")

        products = self.machine.products
        if not products:
            print("No products in stock")
            return

        # Counter keeps first-seen order
        for product, quantity in Counter(products).items():
            print(f"{product.name} x {quantity} @ {render_currency(product.price)}")

    def output_change(self):
        print("Current Change")
        print("==============")

        change = self.machine.change
        if not change:
            print("No change available")
            return

        for label, quantity in Counter(c.label(self.denominations) for c in change).items():
            print(f"{label} x {quantity}")

    # -----------------------------
    # Input handling
    # -----------------------------
    def insert_coin(self, option):
        coin = parse_coin(option, self.denominations)

        if self.machine.insert_coin(coin):
            print("Coin Inserted")
            self.output_balance()
        else:
            self.output_error(f"Invalid argument {option or ''}")

    def purchase_product(self, option):
        result = self.machine.purchase(option)

        if result.is_error:
            self.output_error(result.error.value)
            return

        print(f"{result.vended_product_name} vended")

        if result.has_change:
            print(f"{render_currency(result.total_change)} is dispensed")
            print(f"It consists of: {', '.join(result.change_labels(self.denominations))}")
        else:
            print("No change is dispensed")

    def reload_machine(self, option):
        option = (option or '').lower()

        try:
            if option == 'products':
                self.machine.reset_stock(self.config_loader.initial_products())
                print("Products reloaded back to initial contents")
            elif option == 'change':
                self.machine.reset_change(self.config_loader.initial_change())
                print("Change reloaded back to initial contents")
            else:
                self.output_invalid_input()
        except ConfigError as e:
            # the machine keeps its current contents
            self.output_error(str(e))


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    level = os.environ.get("VENDING_LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        print(f"ERROR: Unknown log level {level!r} in VENDING_LOG_LEVEL")
        return 1
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if len(argv) > 1:
        print("Usage: vending [config.json]")
        return 1

    loader = ConfigLoader(argv[0] if argv else None)
    try:
        cli = CLI(config_loader=loader)
    except ConfigError as e:
        print(f"ERROR: {e}")
        return 1

    cli.run()
    return 0
