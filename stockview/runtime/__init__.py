"""Runtime layers for talking to the stock data service."""
