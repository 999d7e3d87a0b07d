from fhnotifier.config import get_profile
from fhnotifier.digest import collation_key, render_digest, render_topic, topic_header

from tests.sample_data import message, reference, topic

CURRENT = get_profile("current")
LEGACY = get_profile("legacy")


def test_collation_key_numeric_and_case_insensitive():
    words = ["Player 10", "player 2", "Éric", "eric b", "Adam"]
    assert sorted(words, key=collation_key) == ["Adam", "Éric", "eric b", "player 2", "Player 10"]


def test_topic_header_priority():
    accepted_and_vetoed = topic("t1", message(241), message(224))
    assert topic_header(accepted_and_vetoed, CURRENT) == "Trade Accepted:"
    assert topic_header(topic("t2", message(245), message(246)), CURRENT) == "Trade Processed:"
    assert topic_header(topic("t3", message(242)), CURRENT) == "Trade Vetoed by LM:"
    assert topic_header(topic("t4", message(178)), CURRENT) is None
    assert topic_header(accepted_and_vetoed, LEGACY) is None


def test_render_topic_sorts_numerically_with_unrendered_first():
    rendered = render_topic(
        topic(
            "t1",
            message(178, id="m1", to=1, targetId=111),
            message(178, id="m2", to=1, targetId=110),
            message(178, id="m3", to=-1, targetId=101),
        ),
        reference(),
        CURRENT,
    )
    assert [line.message_id for line in rendered.lines] == ["m3", "m2", "m1"]
    assert rendered.lines[0].text is None
    assert rendered.printable_lines == [
        "SHRK added Player 2, TOR C from Free Agency",
        "SHRK added Player 10, TOR C from Free Agency",
    ]


def test_render_digest_layout():
    trade = topic(
        "trade",
        message(224, targetId=102, to=2, **{"from": 1}),
        message(224, targetId=101, to=1, **{"from": 2}),
        message(225, targetId=103, **{"from": 3}),
    )
    add = topic("add", message(180, to=4, targetId=104))

    digest = render_digest([trade, add], reference(), CURRENT)

    assert digest == (
        "Trade Accepted:\n"
        "    BEAR drops Morgan Rielly, TOR D\n"
        "    SHRK trades Mika Zibanejad, NYR C/RW to WOLF\n"
        "    WOLF trades Artemi Panarin, NYR LW/RW to SHRK\n"
        "\n"
        "HAWK added Igor Shesterkin, NYR G from Waivers"
    )


def test_render_digest_legacy_has_no_header():
    trade = topic("trade", message(224, targetId=102, to=2, **{"from": 1}))
    assert render_digest([trade], reference(), LEGACY) == "SHRK trades Mika Zibanejad, NYR RW/C to WOLF"


def test_render_digest_empty_inputs():
    assert render_digest([], reference(), CURRENT) == ""
    unresolvable = topic("t", message(243, targetId=4, **{"from": 1}))
    assert render_digest([unresolvable], reference(), CURRENT) == ""


def test_render_digest_is_repeatable():
    topics = [topic("t", message(178, to=1, targetId=101), message(179, to=1, targetId=103))]
    ref = reference()
    assert render_digest(topics, ref, CURRENT) == render_digest(topics, ref, CURRENT)
