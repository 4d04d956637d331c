DEFAULT_BALANCE = 1500


class StaticBalanceProvider:
    """Balance provider returning a fixed coin count until a live wallet is wired in."""

    def __init__(self, balance=DEFAULT_BALANCE):
        self.balance = int(balance)

    def get_balance(self):
        return self.balance


def format_coins(balance):
    return f"{balance} Coins"
