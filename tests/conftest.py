"""Shared test fixtures: sample artifacts as emitted by each test layer."""

import copy
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

UNIT_SPEC_PASSING = """\
▶ Todo controller
  ✔ creates a todo (1.204ms)
  ✔ lists todos (0.811ms)
▶ Todo controller (3.102ms)
ℹ tests 5
ℹ suites 2
ℹ pass 5
ℹ fail 0
ℹ cancelled 0
ℹ skipped 0
ℹ todo 0
ℹ duration_ms 152.37
---
-----------------|---------|----------|---------|---------|-------------------
File             | % Stmts | % Branch | % Funcs | % Lines | Uncovered Line #s
-----------------|---------|----------|---------|---------|-------------------
All files        |   82.45 |    70.12 |   88.88 |   82.45 |
 todo.controller |   82.45 |    70.12 |   88.88 |   82.45 | 14-18
-----------------|---------|----------|---------|---------|-------------------
"""

UNIT_TAP_FAILING = """\
TAP version 13
# Subtest: creates a todo
ok 1 - creates a todo
  ---
  duration_ms: 1.2
  ...
# Subtest: rejects empty title
not ok 2 - rejects empty title
  ---
  duration_ms: 0.9
  ...
1..2
# tests 2
# suites 0
# pass 1
# fail 1
# cancelled 0
# skipped 0
# todo 0
# duration_ms 88.5
"""

LCOV = """\
TN:
SF:controller/todo.controller.js
FNF:4
FNH:4
LF:60
LH:45
end_of_record
SF:controller/user.controller.js
LF:40
LH:35
end_of_record
"""

BDD_FAILING = """\
...F..

Failures:

1) Scenario: Delete a task # features/todo.feature:20
   ✔ Given a logged in user # steps/user.steps.js:12
   ✖ Then the task is removed # steps/todo.steps.js:40
       AssertionError: expected 200 to equal 204

3 scenarios (1 failed, 2 passed)
12 steps (1 failed, 11 passed)
0m01.254s (executing steps: 0m01.101s)
"""

BDD_PASSING = """\
3 scenarios (3 passed)
9 steps (9 passed)
0m00.412s
"""

API_TEXT = """\
┌─────────────────────────┬──────────────────┬──────────────────┐
│                         │         executed │           failed │
├─────────────────────────┼──────────────────┼──────────────────┤
│              iterations │                1 │                0 │
├─────────────────────────┼──────────────────┼──────────────────┤
│                requests │                8 │                1 │
├─────────────────────────┼──────────────────┼──────────────────┤
│              assertions │               14 │                1 │
├─────────────────────────┴──────────────────┴──────────────────┤
│ total run duration: 1085ms                                    │
└───────────────────────────────────────────────────────────────┘
  ✖  Create task - Status code is 201
"""

API_REPORT = {
    "run": {
        "stats": {
            "requests": {"total": 5, "failed": 0},
            "assertions": {"total": 10, "failed": 2},
        },
        "timings": {"started": 1700000000000, "completed": 1700000001500},
        "executions": [
            {
                "item": {"name": "Create task"},
                "assertions": [
                    {
                        "assertion": "Status code is 201",
                        "error": {"message": "expected 500 to equal 201"},
                    },
                    {"assertion": "Response has id"},
                ],
            },
            {
                "item": {"name": "List tasks"},
                "assertions": [{"assertion": "Status code is 200"}],
            },
        ],
    }
}

UI_FAILING = """\
  Authentication
    ✔ signs up a new user (2345ms)
    1) logs in with wrong password

  Tasks
    ✔ creates a task (1203ms)

  2 passing (1m 12s)
  1 failing

  1) Authentication logs in with wrong password:
     TimeoutError: Waiting for element to be located By(css selector, .error)
      at node_modules/selenium-webdriver/lib/webdriver.js:913:17
"""


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def write_artifact(tmp_path: Path):
    """Write an artifact under tmp_path, creating parent directories."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def unit_spec_passing() -> str:
    return UNIT_SPEC_PASSING


@pytest.fixture
def unit_tap_failing() -> str:
    return UNIT_TAP_FAILING


@pytest.fixture
def lcov() -> str:
    return LCOV


@pytest.fixture
def bdd_failing() -> str:
    return BDD_FAILING


@pytest.fixture
def bdd_passing() -> str:
    return BDD_PASSING


@pytest.fixture
def api_text() -> str:
    return API_TEXT


@pytest.fixture
def api_report() -> dict[str, object]:
    return copy.deepcopy(API_REPORT)


@pytest.fixture
def ui_failing() -> str:
    return UI_FAILING
