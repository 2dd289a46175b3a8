from types import MappingProxyType

from monex.domain.monetary.currency import Currency


# Fiat currencies
USD = Currency("USD")
EUR = Currency("EUR")
GBP = Currency("GBP")
CHF = Currency("CHF")
JPY = Currency("JPY")

# Crypto currencies
BTC = Currency("BTC")
ETH = Currency("ETH")
USDT = Currency("USDT")

# Commodities
XAU = Currency("XAU")
XAG = Currency("XAG")

# Number of fractional digits commonly used when rounding amounts in each currency.
# Read-only; pass it to `LookupPrecisionProvider` (or build your own mapping on top of it).
STANDARD_PRECISIONS = MappingProxyType(
    {
        USD: 2,
        EUR: 2,
        GBP: 2,
        CHF: 2,
        JPY: 0,
        BTC: 8,
        ETH: 18,
        USDT: 6,
        XAU: 4,
        XAG: 4,
    }
)
