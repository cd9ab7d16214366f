"""Testy fasady NotionWrapper."""

from __future__ import annotations

import pytest

from data_model import NotionConfig, SimplifiedBlock
from notion_api import NotionAPIError, NotionWrapper
from notion_api.client import NotionClient

from conftest import PAGE_ID, make_block


def test_page_id_accessors(wrapper):
    assert wrapper.get_page_id() == PAGE_ID
    wrapper.set_page_id("other")
    assert wrapper.get_page_id() == "other"


def test_set_page_id_makes_no_remote_call(wrapper, fake_client):
    wrapper.set_page_id("other")
    assert fake_client.calls == []


def test_default_client_is_rest_client():
    notion = NotionWrapper(NotionConfig(token="secret_x", page_id=PAGE_ID))
    assert isinstance(notion.client, NotionClient)
    assert notion.client.session.headers["Authorization"] == "Bearer secret_x"


def test_get_page_uses_current_page(wrapper, fake_client):
    page = wrapper.get_page()
    assert page["object"] == "page"
    assert page["id"] == PAGE_ID
    assert fake_client.calls == [("retrieve_page", PAGE_ID)]


def test_get_page_propagates_remote_error(wrapper):
    wrapper.set_page_id("missing")
    with pytest.raises(NotionAPIError) as exc_info:
        wrapper.get_page()
    assert exc_info.value.status == 404


def test_page_operation_without_page_id_raises():
    notion = NotionWrapper(NotionConfig(token="secret_x"), client=object())  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        notion.get_page()


def test_add_text_appends_under_page(wrapper, fake_client):
    response = wrapper.add_text("hi")

    created = response["results"][0]
    assert created["type"] == "paragraph"
    assert created["paragraph"]["rich_text"][0]["text"]["content"] == "hi"
    assert created["parent"] == {"type": "page_id", "page_id": PAGE_ID}
    assert fake_client.children[PAGE_ID] == [created["id"]]


def test_add_text_appends_under_parent_block(wrapper, fake_client):
    fake_client.add(PAGE_ID, make_block("blockX", "parent"))

    response = wrapper.add_text("hi", "blockX")

    created = response["results"][0]
    assert created["parent"] == {"type": "block_id", "block_id": "blockX"}
    assert fake_client.children["blockX"] == [created["id"]]


def test_add_text_to_block_works_without_page_id(fake_client):
    fake_client.add(PAGE_ID, make_block("blockX", "parent"))
    notion = NotionWrapper(NotionConfig(token="secret_x"), client=fake_client)

    response = notion.add_text("hi", "blockX")
    assert response["results"][0]["parent"]["block_id"] == "blockX"


def test_delete_block_archives(wrapper, fake_client):
    created = wrapper.add_text("to delete")["results"][0]

    deleted = wrapper.delete_block(created["id"])

    assert deleted["id"] == created["id"]
    assert deleted["archived"] is True


def test_delete_missing_block_propagates(wrapper):
    with pytest.raises(NotionAPIError):
        wrapper.delete_block("nope")


def test_update_paragraph_block(wrapper, capsys):
    created = wrapper.add_text("before")["results"][0]

    updated = wrapper.update_block(created["id"], "after")

    assert updated["id"] == created["id"]
    assert updated["paragraph"]["rich_text"][0]["text"]["content"] == "after"
    assert "[warn]" not in capsys.readouterr().err


def test_update_non_paragraph_warns_and_still_sends(wrapper, fake_client, capsys):
    fake_client.add(PAGE_ID, make_block("h", "Title", block_type="heading_1"))

    with pytest.raises(NotionAPIError) as exc_info:
        wrapper.update_block("h", "new title")

    assert exc_info.value.code == "validation_error"
    assert ("update_block", "h") in fake_client.calls
    err = capsys.readouterr().err
    assert "[warn]" in err
    assert "heading_1" in err


def test_update_retrieves_block_first(wrapper, fake_client):
    created = wrapper.add_text("x")["results"][0]
    fake_client.calls.clear()

    wrapper.update_block(created["id"], "y")

    assert fake_client.calls == [("retrieve_block", created["id"]), ("update_block", created["id"])]


def test_get_page_blocks_end_to_end(wrapper, sample_page):
    blocks = wrapper.get_page_blocks()

    assert blocks == [
        SimplifiedBlock("A", "Intro", "paragraph", None),
        SimplifiedBlock("B", "Details", "paragraph", None),
        SimplifiedBlock("C", "Sub", "paragraph", "B"),
    ]


def test_get_page_blocks_fetches_sequentially(wrapper, sample_page):
    wrapper.get_page_blocks()
    assert sample_page.calls == [("list_children", PAGE_ID), ("list_children", "B")]


def test_get_page_blocks_contains_failed_subtree(wrapper, sample_page, capsys):
    sample_page.add(PAGE_ID, make_block("D", "Last"))
    sample_page.failing.add("B")

    blocks = wrapper.get_page_blocks()

    assert [b.block_id for b in blocks] == ["A", "B", "D"]
    assert "[warn]" in capsys.readouterr().err


def test_get_page_blocks_propagates_top_level_failure(wrapper, sample_page):
    sample_page.failing.add(PAGE_ID)
    with pytest.raises(NotionAPIError):
        wrapper.get_page_blocks()


def test_get_page_blocks_empty_page(wrapper):
    assert wrapper.get_page_blocks() == []
