from norges_fx import NorgesBankClient, fetch_exchange_rate, fetch_reference_rates

# Latest USD/EUR cross rate, stamped with today's date
rate = fetch_exchange_rate("USD", "EUR")
print(rate.as_dict())

# Currencies quoted per 100 units are normalised before dividing
print(fetch_exchange_rate("JPY", "USD").rate)

# The date is only echoed; Norges Bank is always asked for its latest rate
print(fetch_exchange_rate("NOK", "GBP", "2024-05-02").as_dict())

# NOK per unit for several currencies in one request, with a custom timeout
with NorgesBankClient(timeout=10) as client:
    print(fetch_reference_rates(["USD", "EUR", "SEK", "KRW"], source=client))
