"""GoMarketplace cart: persisted shopping-cart ledger and its HTTP API."""
