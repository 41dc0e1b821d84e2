"""Utilities: ranges, colours, time points, numeric helpers and tagged optional values."""