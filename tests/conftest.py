"""Shared fixtures for skilltable tests."""

import pytest

from skilltable.models import HandleIdMap

SKILL_ID_LUB = """\
-- generated skill id table
SKID = {
\tNV_BASIC = 1,
\tNV_FIRSTAID = 2,
\t--[[ retired
\tNV_OLD = 99,
\t]]
\tSM_SWORD = 0x3,
}
"""

SKILL_INFO_LUB = """\
SKILL_INFO_LIST = {
\t[1] = { "NV_BASIC", SkillName = "Basic Skill", MaxLv = 9 },
\t[SKID.NV_FIRSTAID] = {
\t\t"NV_FIRSTAID",
\t\tSkillName = "First Aid",
\t\t_NeedSkillList = { [SKID.NV_BASIC] = 4 }
\t},
\t[SKID.SM_SWORD] = { "SM_SWORD", MaxLv = 10 },
}
"""

_ENV_KEYS = ("SKILLID_LUB", "SKILLINFOLIST_LUB", "ID_HANDLE_TXT", "NAME_TABLE_TXT", "SKILLTABLE_ENCODING")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep config environment variables out of every test."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def skill_id_text():
    return SKILL_ID_LUB


@pytest.fixture
def skill_info_text():
    return SKILL_INFO_LUB


@pytest.fixture
def handle_ids():
    """Small handle table matching SKILL_ID_LUB."""
    return HandleIdMap.from_entries([("NV_BASIC", 1), ("NV_FIRSTAID", 2), ("SM_SWORD", 3)])


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run inside an empty directory, like the tool next to its .lub files."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
