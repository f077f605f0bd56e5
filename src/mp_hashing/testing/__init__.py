"""Testing utilities – fakes for the crypto provider port."""
