"""
-------
conftest.py
-------
Shared pytest fixtures for odds tests.
"""

import threading

import pytest

import odds.config as config
import odds.rng as rng
from odds.xoshiro import Xoshiro256ss


class ScriptedRng:
  """Stream that replays a fixed list of 64-bit words."""

  def __init__(self, words):
    self.words = list(words)
    self.calls = 0

  def next64(self):
    word = self.words[self.calls]
    self.calls += 1
    return word


# -----------------------------------------------------------------------------
# Stream fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def seeded_rng():
  """Provide a deterministic stream with fixed seed."""
  return Xoshiro256ss(seed=123)


@pytest.fixture
def scripted():
  """Factory for streams replaying given words."""
  return ScriptedRng


# -----------------------------------------------------------------------------
# Global state isolation
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def fresh_thread_streams(monkeypatch):
  """Drop default streams so each test starts without inherited state."""
  monkeypatch.setattr(rng, "_thread_local", threading.local())
  yield


@pytest.fixture(autouse=True)
def restore_config():
  """Undo any config changes made by a test."""
  previous = config.get_config()
  yield
  config.set_config(previous)
