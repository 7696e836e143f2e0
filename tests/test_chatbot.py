import random

import pytest

from portfolio.errors import ValidationError
from portfolio.services.chatbot import (
    ChatResponder,
    RuleBasedChatbot,
    build_system_prompt,
    trim_history,
    MODE_REMOTE,
    MODE_RULE_BASED,
)
from portfolio.services.circuit_breaker import CircuitBreaker
from portfolio.services.openai_service import is_quota_error

SKILLS = [
    {"name": "React", "percentage": 95, "type": "development"},
    {"name": "Figma", "percentage": 90, "type": "design"},
    {"name": "Node.js", "percentage": 85, "type": "development"},
    {"name": "Git", "percentage": 80, "type": "tools"},
]

WORKS = [
    {"title": "Shop", "category": "Web", "description": "x" * 120, "likes": 3},
    {"title": "Tracker", "category": "Mobile", "description": "", "likes": 0},
]


class QuotaError(Exception):
    status_code = 429


class FakeCompletionClient:
    def __init__(self, reply="Remote answer", error=None, configured=True):
        self.reply = reply
        self.error = error
        self.is_configured = configured
        self.calls = []

    def complete(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.reply


def make_responder(client=None, skills=SKILLS, works=WORKS, seed=7, breaker=None):
    return ChatResponder(
        completion_client=client,
        breaker=breaker or CircuitBreaker(),
        rng=random.Random(seed),
        context_loader=lambda: (skills, works),
    )


@pytest.fixture
def chatbot():
    return RuleBasedChatbot(rng=random.Random(3))


# --- rule-based classification ---

def test_greeting_returns_a_canned_greeting(chatbot):
    reply = chatbot.process_message("Hello there!", SKILLS, WORKS)
    assert reply in RuleBasedChatbot.GREETING_RESPONSES


def test_greeting_choice_follows_injected_random_source():
    first = RuleBasedChatbot(rng=random.Random(11)).process_message("hey", [], [])
    second = RuleBasedChatbot(rng=random.Random(11)).process_message("hey", [], [])
    expected = random.Random(11).choice(RuleBasedChatbot.GREETING_RESPONSES)
    assert first == second == expected


def test_greeting_words_must_stand_alone(chatbot):
    # "this" and "which" contain "hi" but are not greetings
    reply = chatbot.process_message("Which of this is it?", [], [])
    assert reply not in RuleBasedChatbot.GREETING_RESPONSES


def test_his_is_not_a_greeting(chatbot):
    reply = chatbot.process_message("What are his skills?", [], [])
    assert reply == RuleBasedChatbot.NO_SKILLS_RESPONSE


def test_plural_service_names_still_match(chatbot):
    assert chatbot.process_message("apps", [], []) == RuleBasedChatbot.MOBILE_RESPONSE


def test_about_mentions_project_count_and_top_skills(chatbot):
    reply = chatbot.process_message("Tell me about yourself", SKILLS, WORKS)
    assert "2 projects" in reply
    assert "React, Figma, Node.js, Git" in reply


def test_skills_without_data_uses_general_expertise(chatbot):
    reply = chatbot.process_message("What skills do you have?", [], [])
    assert "has expertise in web development, mobile applications, and UI/UX design" in reply


def test_skills_lists_development_then_design(chatbot):
    reply = chatbot.process_message("what skills do you have", SKILLS, WORKS)

    assert reply.startswith("Here are the skills:")
    assert reply.index("Development Skills:") < reply.index("Design Skills:")
    assert "• React (95%)" in reply
    assert "• Figma (90%)" in reply
    assert "Git" not in reply


def test_services_lists_four_services(chatbot):
    reply = chatbot.process_message("Which services do you offer?", SKILLS, WORKS)
    assert "1. Web Development" in reply
    assert "4. Web Design" in reply


def test_projects_are_enumerated_with_truncated_description(chatbot):
    reply = chatbot.process_message("Show me your projects", SKILLS, WORKS)

    assert reply.startswith("They have worked on 2 projects.")
    assert "1. Shop (Web)" in reply
    assert "   " + "x" * 100 + "...\n" in reply
    assert "2. Tracker (Mobile)" in reply


def test_projects_without_data(chatbot):
    reply = chatbot.process_message("portfolio?", [], [])
    assert reply == RuleBasedChatbot.NO_PROJECTS_RESPONSE


def test_contact(chatbot):
    assert chatbot.process_message("How can I reach you?", [], []) == RuleBasedChatbot.CONTACT_RESPONSE


def test_experience(chatbot):
    assert chatbot.process_message("How many years?", [], []) == RuleBasedChatbot.EXPERIENCE_RESPONSE


@pytest.mark.parametrize("message, expected", [
    ("web development", RuleBasedChatbot.WEB_RESPONSE),
    ("android app", RuleBasedChatbot.MOBILE_RESPONSE),
    ("ui ux", RuleBasedChatbot.DESIGN_RESPONSE),
])
def test_specific_services(chatbot, message, expected):
    assert chatbot.process_message(message, [], []) == expected


def test_unknown_message_gets_generic_prompt(chatbot):
    assert chatbot.process_message("qwerty", [], []) in RuleBasedChatbot.DEFAULT_RESPONSES


# --- prompt and history ---

def test_system_prompt_embeds_live_context():
    prompt = build_system_prompt(SKILLS, WORKS)

    assert "React (95% proficiency)" in prompt
    assert "Figma (90% proficiency)" in prompt
    assert "1. Shop (Web)" in prompt
    assert "Likes: 3" in prompt
    assert "x" * 150 + "..." not in prompt


def test_trim_history_keeps_last_ten_valid_turns():
    history = [{"role": "user", "content": f"m{i}"} for i in range(12)]
    history.append({"role": "system", "content": "ignored"})

    trimmed = trim_history(history)

    assert [t["content"] for t in trimmed] == [f"m{i}" for i in range(3, 12)]
    assert trim_history("not a list") == []


# --- responder ---

def test_empty_message_is_rejected():
    with pytest.raises(ValidationError):
        make_responder().respond("   ")


def test_remote_success_is_tagged_remote():
    client = FakeCompletionClient()
    history = [{"role": "assistant", "content": "Hi!"}]

    result = make_responder(client).respond("  Who are you? ", history)

    assert result == {"response": "Remote answer", "success": True, "mode": MODE_REMOTE}
    messages = client.calls[0]
    assert messages[0]["role"] == "system"
    assert "React" in messages[0]["content"]
    assert messages[1:] == [
        {"role": "assistant", "content": "Hi!"},
        {"role": "user", "content": "Who are you?"},
    ]


def test_unconfigured_remote_uses_rules():
    client = FakeCompletionClient(configured=False)
    result = make_responder(client).respond("hello")

    assert result["mode"] == MODE_RULE_BASED
    assert result["response"] in RuleBasedChatbot.GREETING_RESPONSES
    assert client.calls == []


def test_quota_failure_disables_remote_for_later_requests():
    client = FakeCompletionClient(error=QuotaError("quota"))
    responder = make_responder(client)

    results = [responder.respond("hello") for _ in range(5)]

    assert all(r["mode"] == MODE_RULE_BASED for r in results)
    assert len(client.calls) == 1
    assert responder.breaker.is_open


def test_other_failures_only_affect_the_current_request():
    client = FakeCompletionClient(error=RuntimeError("timeout"))
    responder = make_responder(client)

    assert responder.respond("hello")["mode"] == MODE_RULE_BASED
    client.error = None
    assert responder.respond("hello")["mode"] == MODE_REMOTE
    assert len(client.calls) == 2


def test_breaker_reset_reenables_remote():
    client = FakeCompletionClient(error=QuotaError("quota"))
    responder = make_responder(client)
    responder.respond("hello")

    client.error = None
    responder.breaker.reset()

    assert responder.respond("hello")["mode"] == MODE_REMOTE


def test_context_failure_still_answers():
    def broken_loader():
        raise RuntimeError("database down")

    responder = ChatResponder(context_loader=broken_loader, rng=random.Random(1))
    result = responder.respond("What skills do you have?")

    assert result["mode"] == MODE_RULE_BASED
    assert result["response"] == RuleBasedChatbot.NO_SKILLS_RESPONSE


@pytest.mark.parametrize("error, expected", [
    (QuotaError(), True),
    (type("CodeError", (Exception,), {"code": "insufficient_quota"})(), True),
    (RuntimeError("boom"), False),
])
def test_is_quota_error(error, expected):
    assert is_quota_error(error) is expected


# --- HTTP surface ---

def test_chat_endpoint_falls_back_without_api_key(client, auth_headers):
    client.post("/api/skills", json={"name": "Flask", "percentage": 70, "type": "development"}, headers=auth_headers)

    res = client.post("/api/chatbot", json={"message": "what skills do you know?"})

    assert res.status_code == 200
    body = res.get_json()
    assert body["success"] is True
    assert body["mode"] == MODE_RULE_BASED
    assert "Flask (70%)" in body["response"]


def test_chat_endpoint_requires_message(client):
    res = client.post("/api/chatbot", json={"message": ""})
    assert res.status_code == 400
    assert res.get_json() == {"error": "Message is required"}


def test_chat_endpoint_uses_injected_responder(app, client):
    fake = FakeCompletionClient(error=QuotaError("quota"))
    app.extensions["portfolio_chat_responder"] = make_responder(fake)

    modes = [client.post("/api/chatbot", json={"message": "hi"}).get_json()["mode"] for _ in range(4)]

    assert modes == [MODE_RULE_BASED] * 4
    assert len(fake.calls) == 1


def test_chat_status(client):
    res = client.get("/api/chatbot/status")
    assert res.get_json() == {"configured": False, "circuit": "closed", "mode": MODE_RULE_BASED}
