"""Test suite for termprogress."""
