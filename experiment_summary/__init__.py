"""Percentage summaries of XOR-SLP benchmark logs."""
