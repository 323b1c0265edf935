"""Static instrument tables for venues without a symbol listing endpoint.

Each table is a tuple of (provider symbol, display name) pairs, in the
order the scanner walks them.
"""

DERIV_SYNTHETIC_INDICES: tuple[tuple[str, str], ...] = (
    ("R_10", "Volatility 10 Index"),
    ("R_25", "Volatility 25 Index"),
    ("R_50", "Volatility 50 Index"),
    ("R_75", "Volatility 75 Index"),
    ("R_100", "Volatility 100 Index"),
    ("1HZ10V", "Volatility 10 (1s) Index"),
    ("1HZ25V", "Volatility 25 (1s) Index"),
    ("1HZ50V", "Volatility 50 (1s) Index"),
    ("1HZ75V", "Volatility 75 (1s) Index"),
    ("1HZ100V", "Volatility 100 (1s) Index"),
    ("BOOM300N", "Boom 300 Index"),
    ("BOOM500", "Boom 500 Index"),
    ("BOOM1000", "Boom 1000 Index"),
    ("CRASH300N", "Crash 300 Index"),
    ("CRASH500", "Crash 500 Index"),
    ("CRASH1000", "Crash 1000 Index"),
    ("JD10", "Jump 10 Index"),
    ("JD25", "Jump 25 Index"),
    ("JD50", "Jump 50 Index"),
    ("JD75", "Jump 75 Index"),
    ("JD100", "Jump 100 Index"),
    ("stpRNG", "Step Index"),
    ("RDBEAR", "Bear Market Index"),
    ("RDBULL", "Bull Market Index"),
)

DERIV_FOREX: tuple[tuple[str, str], ...] = tuple(
    (f"frx{base}{quote}", f"{base}/{quote}")
    for base, quote in (
        ("AUD", "CAD"), ("AUD", "CHF"), ("AUD", "JPY"), ("AUD", "NZD"),
        ("AUD", "USD"), ("EUR", "AUD"), ("EUR", "CAD"), ("EUR", "CHF"),
        ("EUR", "GBP"), ("EUR", "JPY"), ("EUR", "NZD"), ("EUR", "USD"),
        ("GBP", "AUD"), ("GBP", "CAD"), ("GBP", "CHF"), ("GBP", "JPY"),
        ("GBP", "NZD"), ("GBP", "USD"), ("NZD", "JPY"), ("NZD", "USD"),
        ("USD", "CAD"), ("USD", "CHF"), ("USD", "JPY"), ("USD", "MXN"),
        ("USD", "NOK"), ("USD", "SEK"),
    )
)

DERIV_STOCKS: tuple[tuple[str, str], ...] = (
    ("AAPL", "Apple Inc"),
    ("AMZN", "Amazon"),
    ("GOOGL", "Alphabet"),
    ("META", "Meta Platforms"),
    ("MSFT", "Microsoft"),
    ("NFLX", "Netflix"),
    ("NVDA", "NVIDIA"),
    ("TSLA", "Tesla"),
    ("BA", "Boeing"),
    ("DIS", "Walt Disney"),
    ("IBM", "IBM"),
    ("INTC", "Intel"),
    ("PFE", "Pfizer"),
    ("PYPL", "PayPal"),
    ("V", "Visa"),
)

DERIV_STOCK_INDICES: tuple[tuple[str, str], ...] = (
    ("OTC_AS51", "Australia 200"),
    ("OTC_DJI", "Wall Street 30"),
    ("OTC_FCHI", "France 40"),
    ("OTC_FTSE", "UK 100"),
    ("OTC_GDAXI", "Germany 40"),
    ("OTC_HSI", "Hong Kong 50"),
    ("OTC_N225", "Japan 225"),
    ("OTC_NDX", "US Tech 100"),
    ("OTC_SPC", "US 500"),
    ("OTC_SSMI", "Swiss 20"),
)

DERIV_COMMODITIES: tuple[tuple[str, str], ...] = (
    ("frxXAUUSD", "Gold/USD"),
    ("frxXAGUSD", "Silver/USD"),
    ("frxXPDUSD", "Palladium/USD"),
    ("frxXPTUSD", "Platinum/USD"),
    ("WLDOIL", "Oil/USD"),
)

DERIV_ETFS: tuple[tuple[str, str], ...] = (
    ("SPY", "SPDR S&P 500 ETF"),
    ("QQQ", "Invesco QQQ Trust"),
    ("IWM", "iShares Russell 2000"),
    ("EEM", "iShares MSCI Emerging Markets"),
    ("GLD", "SPDR Gold Shares"),
    ("SLV", "iShares Silver Trust"),
    ("USO", "United States Oil Fund"),
    ("VXX", "iPath Series B S&P 500 VIX"),
)


def _usdt_pairs(bases: str) -> tuple[tuple[str, str], ...]:
    return tuple((base, f"{base}/USDT") for base in bases.split())


# Layer-1 majors, served from Binance spot candles.
L1S_PAIRS = _usdt_pairs("BTC ETH XRP SOL XLM BNB DOGE")

# Meme and momentum coins, served from Bybit spot candles.
MEME_PAIRS = _usdt_pairs(
    "PEPE SUI FARTCOIN PIEVERSE AVAX LINK ADA WLD LTC HYPE ENA H WIF NEAR "
    "BCH UNI GALA WLFI ASTER AAVE PENGU TRUMP MON DOT FIL ARB FET LDO PUMP "
    "ICP CRV SHIB TRX OP VIRTUAL RESOLV TON CFX APE PNUT ONDO HBAR EIGEN "
    "STRK PEOPLE ORDI TIA MOODENG TURBO SEI KAS ETHFI DYDX AR TRB POL ATOM "
    "IP SPX CAKE COAI CRO OM POPCAT SUSHI BOME SAND VINE LPT HUMA KAITO "
    "SOON BSV KAIA AXS GOAT THETA FLOCK WCT ANIME ZBCN SYRUP JCT SPK CETUS "
    "USUAL XPIN KERNEL TOSHI COOKIE"
)
