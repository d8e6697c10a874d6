"""Synthetic data generators for SubSpend development and tests."""
