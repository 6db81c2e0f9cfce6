from decimal import Decimal

# Anything accepted where an amount is expected. Strings may be decimal or `0x`/`-0x` prefixed hex.
type AmountLike = Decimal | int | float | str
