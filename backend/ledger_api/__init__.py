"""Ledger API: accounts, transactions, sequential ids and derived balances."""
