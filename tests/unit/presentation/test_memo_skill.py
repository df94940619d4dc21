"""Memo Skill Scenario Tests"""
import asyncio

import pytest

from src.application.ports.repositories import IAttributesRepository
from src.domain.memo import AttributeBag
from src.domain.skill import PersistenceFailure
from src.infrastructure.persistence import InMemoryAttributesRepository
from src.presentation.skill import build_skill

APOLOGY = "Sorry, I can't understand the command. Please say again."


def _speech(response: dict) -> str:
    ssml = response["response"]["outputSpeech"]["ssml"]
    return ssml.removeprefix("<speak>").removesuffix("</speak>")


def _reprompt(response: dict) -> str | None:
    reprompt = response["response"].get("reprompt")
    if reprompt is None:
        return None
    return reprompt["outputSpeech"]["ssml"].removeprefix("<speak>").removesuffix("</speak>")


class UnavailableRepository(IAttributesRepository):
    async def load(self, user_id: str) -> AttributeBag:
        raise PersistenceFailure("load", user_id, "AccessDeniedException")

    async def save(self, user_id: str, bag: AttributeBag) -> None:
        raise PersistenceFailure("save", user_id, "AccessDeniedException")


class TestLaunch:
    """起動時の挨拶のテスト"""

    @pytest.mark.parametrize(
        "memos, expected",
        [
            ([], "Welcome to the Memo Skill, you have no messages!"),
            (["a"], "Welcome to the Memo Skill, you have 1 message!"),
            (["a", "b"], "Welcome to the Memo Skill, you have 2 messages!"),
        ],
    )
    def test_greeting_counts_memos(self, settings, launch_event, user_id, memos, expected):
        """正常: 1件のときだけ単数形"""
        # Arrange
        repository = InMemoryAttributesRepository({user_id: {"memos": memos}})
        skill = build_skill(settings, attributes_repository=repository)

        # Act
        response = asyncio.run(skill.invoke(launch_event()))

        # Assert
        assert _speech(response) == expected
        assert _reprompt(response) == expected
        assert response["response"]["card"] == {
            "type": "Simple",
            "title": "Memo",
            "content": expected,
        }
        assert response["response"]["shouldEndSession"] is False


class TestCreateMemo:
    """メモ作成のテスト"""

    def test_create_on_empty_bag(self, skill, repository, intent_event, user_id):
        """正常: 保存してから確認を返す"""
        # Act
        response = asyncio.run(
            skill.invoke(
                intent_event("CreateMemoIntent", slots={"Memo": "buy milk"}, dialog_state="COMPLETED")
            )
        )

        # Assert
        assert repository.snapshot(user_id) == {"memos": ["buy milk"]}
        assert _speech(response) == "Memo created: buy milk"
        assert _reprompt(response) is None
        assert response["response"]["card"]["content"] == "Memo created: buy milk"
        assert response["response"]["shouldEndSession"] is True

    @pytest.mark.parametrize("dialog_state", [None, "STARTED", "IN_PROGRESS"])
    def test_incomplete_dialog_delegates(self, skill, repository, intent_event, user_id, dialog_state):
        """正常: スロット収集中は委譲し、ストレージに触れない"""
        # Act
        response = asyncio.run(
            skill.invoke(
                intent_event("CreateMemoIntent", slots={"Memo": None}, dialog_state=dialog_state)
            )
        )

        # Assert
        body = response["response"]
        assert body["directives"][0]["type"] == "Dialog.Delegate"
        assert body["directives"][0]["updatedIntent"]["name"] == "CreateMemoIntent"
        assert "outputSpeech" not in body
        assert repository.save_count == 0
        assert repository.snapshot(user_id) is None

    def test_completed_without_slot_apologizes(self, skill, repository, intent_event):
        """異常: COMPLETED なのにスロットが空なら謝罪"""
        response = asyncio.run(
            skill.invoke(intent_event("CreateMemoIntent", slots={"Memo": None}, dialog_state="COMPLETED"))
        )

        assert _speech(response) == APOLOGY
        assert repository.save_count == 0


class TestListenMemos:
    """メモ一覧のテスト"""

    def test_plural_listing(self, settings, intent_event, user_id):
        """正常: 2件以上は複数形で列挙する"""
        repository = InMemoryAttributesRepository({user_id: {"memos": ["a", "b"]}})
        skill = build_skill(settings, attributes_repository=repository)

        response = asyncio.run(skill.invoke(intent_event("ListenMemoIntent")))

        assert _speech(response) == "Here is your messages: a, b"
        assert _reprompt(response) == "Here is your messages: a, b"

    def test_single_listing(self, settings, intent_event, user_id):
        """正常: 1件は単数形"""
        repository = InMemoryAttributesRepository({user_id: {"memos": ["a"]}})
        skill = build_skill(settings, attributes_repository=repository)

        response = asyncio.run(skill.invoke(intent_event("ListenMemoIntent")))

        assert _speech(response) == "Here is your message: a"

    def test_no_memos(self, skill, intent_event):
        """正常: 空なら専用の文言"""
        response = asyncio.run(skill.invoke(intent_event("ListenMemoIntent")))

        assert _speech(response) == "You have no messages to listen to."


class TestConversation:
    """複数ターンのテスト"""

    def test_create_list_delete_list(self, skill, intent_event, launch_event):
        """正常: 作成順に列挙し、全削除後は空になる"""
        # Arrange
        for memo in ["first", "second", "third"]:
            asyncio.run(
                skill.invoke(
                    intent_event("CreateMemoIntent", slots={"Memo": memo}, dialog_state="COMPLETED")
                )
            )

        # Act
        listed = asyncio.run(skill.invoke(intent_event("ListenMemoIntent")))
        deleted = asyncio.run(skill.invoke(intent_event("DeleteMemoIntent")))
        relisted = asyncio.run(skill.invoke(intent_event("ListenMemoIntent")))
        launched = asyncio.run(skill.invoke(launch_event()))

        # Assert
        assert _speech(listed) == "Here is your messages: first, second, third"
        assert _speech(deleted) == "Deletion completed"
        assert _reprompt(deleted) == "Deletion completed"
        assert _speech(relisted) == "You have no messages to listen to."
        assert _speech(launched) == "Welcome to the Memo Skill, you have no messages!"


class TestBuiltInIntents:
    """ビルトインインテントのテスト"""

    def test_help(self, skill, intent_event):
        response = asyncio.run(skill.invoke(intent_event("AMAZON.HelpIntent")))

        assert _speech(response) == "You can save memo and re listen to it"
        assert _reprompt(response) == "You can save memo and re listen to it"

    @pytest.mark.parametrize("name", ["AMAZON.CancelIntent", "AMAZON.StopIntent"])
    def test_cancel_and_stop(self, skill, intent_event, name):
        """正常: Cancel / Stop はどちらも Goodbye で終了"""
        response = asyncio.run(skill.invoke(intent_event(name)))

        assert _speech(response) == "Goodbye!"
        assert _reprompt(response) is None
        assert response["response"]["shouldEndSession"] is True

    def test_session_ended(self, skill, session_ended_event):
        """正常: セッション終了は空のレスポンス"""
        response = asyncio.run(skill.invoke(session_ended_event("USER_INITIATED")))

        assert response["response"] == {}


class TestErrors:
    """エラー時の謝罪応答のテスト"""

    def test_unknown_intent_apologizes(self, skill, intent_event):
        """正常: 未知のインテントは謝罪（例外は外に出ない）"""
        response = asyncio.run(skill.invoke(intent_event("AMAZON.FallbackIntent")))

        assert _speech(response) == APOLOGY
        assert _reprompt(response) == APOLOGY
        assert "card" not in response["response"]

    def test_unknown_request_type_apologizes(self, skill, launch_event):
        event = launch_event()
        event["request"]["type"] = "Display.ElementSelected"

        response = asyncio.run(skill.invoke(event))

        assert _speech(response) == APOLOGY

    def test_persistence_failure_apologizes(self, settings, intent_event):
        """正常: 永続化の失敗は謝罪に変換される"""
        skill = build_skill(settings, attributes_repository=UnavailableRepository())

        response = asyncio.run(
            skill.invoke(intent_event("CreateMemoIntent", slots={"Memo": "x"}, dialog_state="COMPLETED"))
        )

        assert _speech(response) == APOLOGY

    def test_corrupted_memos_apologizes(self, settings, intent_event, user_id):
        """異常: 保存済みの memos が壊れていれば謝罪し、上書きしない"""
        # Arrange
        repository = InMemoryAttributesRepository({user_id: {"memos": "abc"}})
        skill = build_skill(settings, attributes_repository=repository)

        # Act
        response = asyncio.run(skill.invoke(intent_event("ListenMemoIntent")))

        # Assert
        assert _speech(response) == APOLOGY
        assert repository.save_count == 0
        assert repository.snapshot(user_id) == {"memos": "abc"}

    def test_missing_user_apologizes(self, skill, repository, launch_event):
        """異常: ユーザーIDが無ければ謝罪"""
        response = asyncio.run(skill.invoke(launch_event(user_id=None)))

        assert _speech(response) == APOLOGY
        assert repository.save_count == 0


class TestSkillTable:
    """ディスパッチテーブル構成のテスト"""

    def test_registration_order(self, skill):
        handlers = skill.request_handlers

        assert len(handlers) == 7
        assert [sorted(getattr(h, "intent_names", [])) for h in handlers[1:6]] == [
            ["CreateMemoIntent"],
            ["DeleteMemoIntent"],
            ["ListenMemoIntent"],
            ["AMAZON.HelpIntent"],
            ["AMAZON.CancelIntent", "AMAZON.StopIntent"],
        ]
        assert len(skill.error_handlers) == 1

    def test_memory_backend_from_settings(self, settings):
        """正常: memory バックエンドを設定で選べる"""
        skill = build_skill(settings)

        assert len(skill.request_handlers) == 7
