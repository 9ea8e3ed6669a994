"""Tests for article assembly and the article endpoints."""

import pytest

from core.errors import EmptyContent, SegmentationFailed
from services.article_services import assemble

from conftest import auth_header, login, register

TEXT = "Hello, world! The cat sat. The CAT ran"


def assemble_text(content, language="en", **overrides):
    kwargs = dict(
        title="Title",
        author=None,
        content=content,
        language=language,
        tags=[],
        is_private=False,
        uploader_id=1,
    )
    kwargs.update(overrides)
    return assemble(**kwargs)


class TestAssemble:
    def test_builds_token_index(self):
        article = assemble_text(TEXT, page_size=4)
        assert "".join(article.words) == TEXT
        assert article.unique_words == {"hello": True, "world": True, "the": True, "cat": True, "sat": True, "ran": True}
        assert article.sentences[0][0] == 0
        assert article.sentences[-1][1] == len(article.words)
        assert len(article.sentences) == 3
        assert all(end - start == 4 for start, end in article.page_data[:-1])
        assert article.page_data[-1][1] == len(article.words)
        assert article.lang == "en"
        assert article.is_system is True

    def test_content_length_counts_characters_not_bytes(self):
        article = assemble_text("Größe 北京", language="de")
        assert article.content_length == 8

    @pytest.mark.parametrize("content", ["", "   ", "\n\t "])
    def test_empty_content_fails_fast(self, content):
        with pytest.raises(EmptyContent):
            assemble_text(content)

    def test_unsupported_language_is_segmentation_failure(self):
        with pytest.raises(SegmentationFailed) as excinfo:
            assemble_text("Bonjour", language="fr")
        assert excinfo.value.__cause__ is not None

    def test_tags_are_cleaned(self):
        article = assemble_text("Hi.", tags=[" news ", "news", "", "easy"])
        assert article.tags == ["news", "easy"]

    def test_private_articles_are_not_system(self):
        assert assemble_text("Hi.", is_private=True).is_system is False


def post_article(client, headers, **overrides):
    body = {
        "title": "A story",
        "author": "Anon",
        "content": TEXT,
        "language": "en",
        "tags": ["easy"],
        "is_private": False,
    }
    body.update(overrides)
    return client.post("/article/", json=body, headers=headers)


class TestArticleEndpoints:
    def test_create_and_fetch(self, client, reader):
        user, _, headers = reader
        response = post_article(client, headers)
        assert response.status_code == 201, response.text
        created = response.json()
        assert created["uploader_id"] == user["id"]
        assert created["content_length"] == len(TEXT)
        assert created["sentences"][0] == [0, 6]

        fetched = client.get(f"/article/{created['id']}", headers=headers)
        assert fetched.status_code == 200
        assert fetched.json() == created

    def test_list_is_a_projection_of_the_full_article(self, client, reader):
        _, _, headers = reader
        created = post_article(client, headers).json()
        body = client.get("/article/", headers=headers).json()
        assert body["count"] == 1
        simple = body["articles"][0]
        assert set(simple) == {"id", "title", "author", "content_length", "created_at", "is_system", "lang", "tags"}
        assert all(simple[key] == created[key] for key in simple)

    def test_filters(self, client, reader):
        _, _, headers = reader
        post_article(client, headers, title="English news")
        post_article(client, headers, title="中文故事", content="我来到北京。", language="zh")
        assert client.get("/article/", params={"lang": "zh"}, headers=headers).json()["count"] == 1
        assert client.get("/article/", params={"lang": "chinese"}, headers=headers).json()["count"] == 1
        assert client.get("/article/", params={"search": "NEWS"}, headers=headers).json()["count"] == 1
        assert client.get("/article/", params={"limit": 1}, headers=headers).json()["count"] == 1
        assert client.get("/article/", params={"offset": 2}, headers=headers).json()["count"] == 0

    def test_search_treats_wildcards_literally(self, client, reader):
        _, _, headers = reader
        post_article(client, headers, title="Plain title")
        post_article(client, headers, title="100% true_story")

        def titles(search):
            body = client.get("/article/", params={"search": search}, headers=headers).json()
            return [a["title"] for a in body["articles"]]

        assert titles("%") == ["100% true_story"]
        assert titles("_") == ["100% true_story"]
        assert titles("PLAIN") == ["Plain title"]
        assert titles("n_t") == []

    def test_private_articles_stay_with_their_owner(self, client, reader):
        _, _, owner_headers = reader
        private = post_article(client, owner_headers, is_private=True).json()
        post_article(client, owner_headers, title="Public")

        register(client, username="other")
        other_headers = auth_header(login(client, username="other")["token"])

        assert client.get(f"/article/{private['id']}", headers=other_headers).status_code == 404
        titles = [a["title"] for a in client.get("/article/", headers=other_headers).json()["articles"]]
        assert titles == ["Public"]
        own = client.get("/article/", headers=owner_headers).json()
        assert own["count"] == 2

    def test_user_articles(self, client, reader):
        owner, _, owner_headers = reader
        post_article(client, owner_headers, is_private=True)
        post_article(client, owner_headers, title="Public")

        register(client, username="other")
        other_headers = auth_header(login(client, username="other")["token"])

        mine = client.get("/article/user", headers=owner_headers).json()
        assert mine["count"] == 2
        theirs = client.get("/article/user", params={"user_id": owner["id"]}, headers=other_headers).json()
        assert [a["title"] for a in theirs["articles"]] == ["Public"]
        assert client.get("/article/user", headers=other_headers).json()["count"] == 0

    def test_missing_article(self, client, reader):
        _, _, headers = reader
        response = client.get("/article/999", headers=headers)
        assert response.status_code == 404
        assert response.json() == {"error": "not_found"}

    def test_empty_content(self, client, reader):
        _, _, headers = reader
        response = post_article(client, headers, content="   ")
        assert response.status_code == 422
        assert response.json() == {"error": "empty_content"}

    def test_unsupported_language(self, client, reader):
        _, _, headers = reader
        response = post_article(client, headers, language="fr")
        assert response.status_code == 422
        assert response.json() == {"error": "segmentation_failed"}

    def test_requires_authentication(self, client):
        assert post_article(client, {}).status_code == 401
