"""Tests for feat, inventory and spell lists."""

from bs4 import BeautifulSoup

from fgpf1.equipment import process_inventory
from fgpf1.feat import process_feats
from fgpf1.spell import process_spells


def charsheet(text):
    return BeautifulSoup("<charsheet>%s</charsheet>" % text, "xml").charsheet


class TestFeats:
    def test_structured_feat(self):
        record = charsheet(
            "<featlist><id-00001><name>Dodge</name><type>Combat</type>"
            "<summary>+1 dodge bonus to AC.</summary>"
            "<prerequisites>Dex 13</prerequisites>"
            "<benefit><p>You gain a <b>+1</b> dodge bonus.</p></benefit>"
            "</id-00001></featlist>")
        feats = process_feats(record)
        assert len(feats) == 1
        dodge = feats[0]
        assert dodge.name == "Dodge"
        assert dodge.type == "Combat"
        assert dodge.summary == "+1 dodge bonus to AC."
        assert dodge.prerequisites == "Dex 13"
        assert dodge.benefit == "<p>You gain a <b>+1</b> dodge bonus.</p>"
        assert dodge.normal == ""
        assert dodge.special == ""

    def test_flat_feats(self):
        record = charsheet(
            "<feats><feat>Power Attack</feat><feat>Cleave</feat></feats>")
        assert [f.name for f in process_feats(record)] == [
            "Power Attack", "Cleave"]

    def test_absent(self):
        assert process_feats(charsheet("")) == []


class TestInventory:
    def test_item(self):
        record = charsheet(
            "<inventorylist><id-00001><name>Longsword</name>"
            "<type>Weapon</type><subtype>Martial</subtype>"
            "<cost>15 gp</cost><weight>4</weight><count>2</count>"
            "<carried>2</carried><damage>1d8</damage><critical>19-20/x2</critical>"
            "<description><p>A <i>fine</i> blade.</p></description>"
            "<unlisted>ignored</unlisted>"
            "</id-00001></inventorylist>")
        items = process_inventory(record)
        assert len(items) == 1
        sword = items[0]
        assert sword.name == "Longsword"
        assert sword.type == "Weapon"
        assert sword.subtype == "Martial"
        assert sword.cost == "15 gp"
        assert sword.weight == "4"
        assert sword.count == 2
        assert sword.carried == 2
        assert sword.description == "<p>A <i>fine</i> blade.</p>"
        assert sword.summary == "A fine blade."
        assert sword.details == {'damage': "1d8", 'critical': "19-20/x2"}

    def test_count_defaults_to_one(self):
        record = charsheet(
            "<inventorylist><id-00001><name>Rope</name></id-00001>"
            "</inventorylist>")
        rope = process_inventory(record)[0]
        assert rope.count == 1
        assert rope.carried == 0
        assert rope.details == {}

    def test_absent(self):
        assert process_inventory(charsheet("")) == []


class TestSpells:
    def test_spellset_levels(self):
        record = charsheet(
            "<spellset><id-00001><levels>"
            "<level0><spells><id-00001><name>Light</name></id-00001>"
            "</spells></level0>"
            "<level1><spells><id-00001><name>Shield</name></id-00001>"
            "<id-00002><name>Sleep</name></id-00002></spells></level1>"
            "</levels></id-00001></spellset>")
        assert process_spells(record) == ["Light", "Shield", "Sleep"]

    def test_spell_leaves(self):
        record = charsheet(
            '<spells><known><spell name="Magic Missile"/></known></spells>')
        assert process_spells(record) == ["Magic Missile"]

    def test_absent(self):
        assert process_spells(charsheet("")) == []
