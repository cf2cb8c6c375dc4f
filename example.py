from gold_bharat import GoldBharat

print(GoldBharat.__version__)  # 0.1.0

# Default usage: headless Chrome scrapes the GoodReturns Chennai page,
# the result is cached for an hour.
gold = GoldBharat()

rate = gold.rate()
print(rate)  # e.g. 7123.0, or None when no rate could be fetched yet

# Manual override while the site is down
gold.set_manual_rate(7250)
print(gold.rate(), gold.is_manual)  # 7250.0 True

# Back to live rates; the next call re-fetches
gold.use_live_rate()

# Value a portfolio at the current rate
summary = gold.valuation(
    [
        {"grams": 10, "buy_price": 6100},
        {"grams": 2.5, "buy_price": 6900},
    ]
)
print(summary.total_invested, summary.total_current_value, summary.total_profit_loss)

# Plain HTTP strategy (no browser)
from gold_bharat import RequestsGoldRateExtractor

light = GoldBharat(RequestsGoldRateExtractor())
print(light.snapshot())
