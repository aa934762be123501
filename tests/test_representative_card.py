"""
Representative h-card tests.
"""

from mf2interpret.services.representative_card import representative_hcard


def _card(**properties):
    return {"type": ["h-card"], "properties": properties}


class TestRepresentativeHcard:

    def test_no_url_in_properties(self, make_doc):
        doc = make_doc([_card(name=["Jane"]), _card(name=["John"])])
        assert representative_hcard(doc, "some_url") is None

    def test_ambiguous_url_matches(self, make_doc):
        """Two url-only matches are ambiguous even with no stronger tier."""
        doc = make_doc([
            _card(name=["Jane"], url=["some_url"]),
            _card(name=["John"], url=["some_url"]),
        ])
        assert representative_hcard(doc, "some_url") is None

    def test_uid_and_url_match(self, make_doc):
        doc = make_doc([
            _card(name=["Jane"], url=["some_url"]),
            _card(name=["John"], uid=["some_url"], url=["some_url"]),
        ])
        card = representative_hcard(doc, "some_url")
        assert card.get("name") == ["John"]
        assert card.get("uid") == ["some_url"]

    def test_uid_and_url_first_wins(self, make_doc):
        doc = make_doc([
            _card(name=["Jane"], uid=["some_url"], url=["some_url"]),
            _card(name=["John"], uid=["some_url"], url=["some_url"]),
        ])
        assert representative_hcard(doc, "some_url").get("name") == ["Jane"]

    def test_rel_me(self, make_doc):
        doc = make_doc(
            [
                _card(name=["Jane"], url=["some_url"]),
                _card(name=["John"], url=["stupid_url", "some_url"]),
            ],
            rels={"me": ["stupid_url"]},
        )
        card = representative_hcard(doc, "some_url")
        assert card.get("url") == ["stupid_url", "some_url"]

    def test_single_url_match(self, make_doc):
        doc = make_doc([
            _card(name=["Jane"], url=["other_url"]),
            _card(name=["John"], url=["some_url"]),
        ])
        card = representative_hcard(doc, "some_url")
        assert card.get("url") == ["some_url"]

    def test_nested_cards_considered(self, make_doc):
        doc = make_doc([{
            "type": ["h-entry"],
            "properties": {
                "author": [_card(name=["Jane"], uid=["https://jane"], url=["https://jane"])],
            },
        }])
        card = representative_hcard(doc, "https://jane")
        assert card.get("name") == ["Jane"]
