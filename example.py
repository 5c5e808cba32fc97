from datetime import date

from fx_converter import RateNotFoundError, __version__, new_converter

print(__version__)  # 0.1.0

# Default usage: bundled USD/EUR reference rates
converter = new_converter()

# Sunday 2023-01-01 uses Friday 2022-12-30 (1.0666)
print(converter.rates.get_rate(date(2023, 1, 1)))
print(converter.a_to_b(date(2023, 1, 1), 10666))  # => ~10000.0
print(converter.b_to_a(date(2023, 1, 1), 10000))  # => ~10666.0

# Custom table
custom = new_converter({date(2023, 1, 6): 1.05})
print(custom.b_to_a(date(2023, 1, 8), 100))

# Table loaded from an ECB eurofxref-hist.csv download
# from fx_converter import load_rates
# custom = new_converter(load_rates("eurofxref-hist.csv", currency="USD"))

try:
    custom.a_to_b(date(2022, 12, 1), 100)
except RateNotFoundError as exc:
    print(exc)  # => no rate found for 2022-12-01
