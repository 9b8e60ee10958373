from bullion_rates import BullionRates, SUPPORTED_CURRENCIES

print(BullionRates.__version__)  # 1.0.0

# Default usage: INR prices from goldprice.org
rates = BullionRates()
print(rates.to_json())

# Several currencies in one request
rates = BullionRates(["USD", "PKR", "AED"])
table = rates.rate_table()
print(table["USD"].gold_rates.price_22k)
print(rates.rates()["PKR"]["silver_rates"])
# => {'Price_OZ': ..., 'Price_G': ..., 'Price_KG': ..., 'Price_Tola': ...}

# Explicit feed URL and a shorter timeout
rates = BullionRates(url="https://data-asg.goldprice.org/dbXRates/EUR", timeout=10)
print(rates.to_json(indent=2))

print(len(SUPPORTED_CURRENCIES), "currencies published by the provider")
