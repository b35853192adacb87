"""Tests for the SKID and skill info extractors."""

import dataclasses

import pytest

from skilltable.errors import SourceError
from skilltable.extractors import SkillIdExtractor, SkillInfoExtractor, resolve_record_key
from skilltable.models import HandleIdMap


class TestSkillIdExtractor:
    """Tests for building the handle <-> ID table."""

    def test_parse_sample(self, skill_id_text):
        ids = SkillIdExtractor(skill_id_text, "skillid.lub").parse()

        assert dict(ids.handle_to_id) == {"NV_BASIC": 1, "NV_FIRSTAID": 2, "SM_SWORD": 3}
        assert dict(ids.id_to_handle) == {1: "NV_BASIC", 2: "NV_FIRSTAID", 3: "SM_SWORD"}
        assert "NV_OLD" not in ids
        assert len(ids) == 3

    def test_missing_marker(self):
        with pytest.raises(SourceError):
            SkillIdExtractor("JOBID = { NOVICE = 0 }").parse()

    def test_unbalanced_table(self):
        with pytest.raises(SourceError):
            SkillIdExtractor("SKID = { NV_BASIC = 1,").parse()

    def test_no_usable_entries(self):
        with pytest.raises(SourceError):
            SkillIdExtractor("SKID = { NV_BASIC = nope, }").parse()

    def test_marker_inside_comment_only(self):
        with pytest.raises(SourceError):
            SkillIdExtractor("-- SKID = { A = 1 }\nJOBID = { B = 2 }").parse()

    def test_table_before_marker_ignored(self):
        text = "local x = { Z = 9 }\nSKID = { A = 1 }"
        ids = SkillIdExtractor(text).parse()
        assert dict(ids.handle_to_id) == {"A": 1}

    def test_last_write_wins(self):
        ids = SkillIdExtractor("SKID = { A = 1, B = 1, A = 2 }").parse()
        assert dict(ids.handle_to_id) == {"A": 2, "B": 1}
        assert dict(ids.id_to_handle) == {1: "B", 2: "A"}

    def test_custom_marker(self):
        ids = SkillIdExtractor("JOBID = { NOVICE = 0, SWORDMAN = 1 }", marker="JOBID").parse()
        assert ids.resolve("SWORDMAN") == 1


class TestHandleIdMap:
    """Tests for the handle table model."""

    def test_read_only(self, handle_ids):
        with pytest.raises(TypeError):
            handle_ids.handle_to_id["X"] = 5
        with pytest.raises(dataclasses.FrozenInstanceError):
            handle_ids.id_to_handle = {}

    def test_sorted_items(self):
        ids = HandleIdMap.from_entries([("B", 10), ("A", 2), ("C", -1)])
        assert ids.sorted_items() == [(-1, "C"), (2, "A"), (10, "B")]

    def test_lookups(self, handle_ids):
        assert handle_ids.resolve("NV_FIRSTAID") == 2
        assert handle_ids.resolve("NOPE") is None
        assert handle_ids.handle_for(3) == "SM_SWORD"
        assert handle_ids.handle_for(42) is None

    def test_empty(self):
        assert len(HandleIdMap()) == 0


class TestRecordKeys:
    """Tests for resolve_record_key."""

    def test_digits(self, handle_ids):
        assert resolve_record_key("12", handle_ids) == 12
        assert resolve_record_key(" 7 ", handle_ids) == 7

    def test_dotted(self, handle_ids):
        assert resolve_record_key("SKID.NV_BASIC", handle_ids) == 1

    def test_bare_handle(self, handle_ids):
        assert resolve_record_key("NV_FIRSTAID", handle_ids) == 2

    def test_inner_whitespace_removed(self, handle_ids):
        assert resolve_record_key("SKID. NV_BASIC", handle_ids) == 1

    def test_unresolvable(self, handle_ids):
        assert resolve_record_key("SKID.UNKNOWN", handle_ids) is None
        assert resolve_record_key("-3", handle_ids) is None
        assert resolve_record_key("", handle_ids) is None
        assert resolve_record_key("SKID.", handle_ids) is None

    def test_negative_id_unresolved(self):
        ids = HandleIdMap.from_entries([("NEG", -1)])
        assert resolve_record_key("SKID.NEG", ids) is None


class TestSkillInfoExtractor:
    """Tests for walking skillinfolist records."""

    def test_parse_sample(self, skill_info_text, handle_ids):
        names = SkillInfoExtractor(skill_info_text).parse(handle_ids)
        assert names == {1: "Basic Skill", 2: "First Aid"}

    def test_iter_records(self, skill_info_text, handle_ids):
        records = list(SkillInfoExtractor(skill_info_text).iter_records(handle_ids))
        assert [r.key for r in records] == ["1", "SKID.NV_FIRSTAID", "SKID.SM_SWORD"]
        assert [r.skill_id for r in records] == [1, 2, 3]
        assert records[2].name == ""
        assert "_NeedSkillList" in records[1].body

    def test_unbalanced_record_stops_scan(self, handle_ids):
        text = '[1] = { SkillName = "A" }\n[2] = { SkillName = "B"\n[3] = { SkillName = "C" }'
        assert SkillInfoExtractor(text).parse(handle_ids) == {1: "A"}

    def test_key_without_assignment_skipped(self, handle_ids):
        text = '[1] = { SkillName = "A" }\n[tail]'
        assert SkillInfoExtractor(text).parse(handle_ids) == {1: "A"}

    def test_assignment_without_table_skipped(self, handle_ids):
        text = '[1] = { SkillName = "A" }\n[2] = 5'
        assert SkillInfoExtractor(text).parse(handle_ids) == {1: "A"}

    def test_last_write_wins(self, handle_ids):
        text = '[1] = { SkillName = "A" },\n[NV_BASIC] = { SkillName = "B" },'
        assert SkillInfoExtractor(text).parse(handle_ids) == {1: "B"}

    def test_empty_and_missing_names_skipped(self, handle_ids):
        text = '[1] = { SkillName = "" },\n[3] = { NoNameField = 1 },'
        assert SkillInfoExtractor(text).parse(handle_ids) == {}

    def test_unresolvable_key_skipped(self, handle_ids):
        text = '[SKID.GHOST] = { SkillName = "Ghost" }, [2] = { SkillName = "Two" }'
        assert SkillInfoExtractor(text).parse(handle_ids) == {2: "Two"}

    def test_commented_records_ignored(self, handle_ids):
        text = '-- [1] = { SkillName = "Hidden" }\n--[[\n[2] = { SkillName = "Gone" }\n]]\n[3] = { SkillName = "Kept" }'
        assert SkillInfoExtractor(text).parse(handle_ids) == {3: "Kept"}

    def test_custom_name_field(self, handle_ids):
        text = '[1] = { SkillName = "Basic", SkillNameKR = "Kibon" }'
        names = SkillInfoExtractor(text, name_field="SkillNameKR").parse(handle_ids)
        assert names == {1: "Kibon"}

    def test_empty_source(self, handle_ids):
        assert SkillInfoExtractor("").parse(handle_ids) == {}
