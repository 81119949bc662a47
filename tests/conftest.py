import os
import sys

import pytest

# Ensure project packages can be imported
sys.path.append(os.getcwd())


WARRIOR_TEXT = """\
Warrior:
  type: 'class'
  level: 5
  tags:
  - 'tank'
  - 'melee'
"""

FIREBALL_TEXT = """\
Fireball:
  name: 'Fireball'
  type: 'Dynamic'
  max-level: 5
  cooldown: 2.5
  enabled: true
  msg: 'It\\'s "hot"'
  tags:
  - 'fire'
  - 'aoe'
  empty: []
  attributes: {}
  stats:
    damage: 10
    range: -3
"""


@pytest.fixture
def warrior_text():
    return WARRIOR_TEXT


@pytest.fixture
def fireball_text():
    return FIREBALL_TEXT


@pytest.fixture
def multi_class_text():
    return (
        "Warrior:\n"
        "  prefix: '&6Warrior'\n"
        "  max-level: 50\n"
        "Mage:\n"
        "  prefix: '&9Mage'\n"
        "  max-level: 30\n"
    )
