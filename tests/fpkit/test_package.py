"""Tests for the package surface of fpkit."""

from __future__ import annotations

import fpkit

import fp_primer


class TestPackage:
    def test_versions_agree(self):
        assert fpkit.__version__ == fp_primer.__version__ == "0.1.0"

    def test_public_names_are_exported(self):
        for name in fpkit.__all__:
            assert hasattr(fpkit, name)
