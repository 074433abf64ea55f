"""Utility helpers for tiercache."""
