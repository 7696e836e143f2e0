# portfolio/services/chatbot.py
import re
import random
import logging

from portfolio.services.circuit_breaker import CircuitBreaker
from portfolio.services.openai_service import is_quota_error
from portfolio.errors import ValidationError

logger = logging.getLogger(__name__)

MODE_REMOTE = "remote"
MODE_RULE_BASED = "rule-based"

CONTEXT_SKILL_LIMIT = 15
CONTEXT_WORK_LIMIT = 10
HISTORY_LIMIT = 10
HISTORY_ROLES = {"user", "assistant"}

SERVICES = [
    "Web Development - High-quality development of sites at the professional level",
    "Mobile Apps - Professional development of applications for iOS and Android",
    "UI/UX Design - Modern and mobile-ready website that will help reach all marketing goals",
    "Web Design - High-quality development of sites at the professional level",
]

PERSONA = """You are a helpful AI assistant representing a portfolio website owner.
You help visitors learn about the portfolio owner. Here's what you know:

About the Portfolio Owner:
- They are a passionate technician with expertise in web development, mobile applications, and UI/UX design
- They have over 5 years of experience in the industry
- They work with various technologies and frameworks to deliver high-quality solutions

Services Offered:
""" + "\n".join(f"{i}. {service}" for i, service in enumerate(SERVICES, start=1))

INSTRUCTIONS = """Your role:
- Answer questions about the portfolio owner's skills, experience, services, and projects
- Use the specific skills and projects listed above when relevant
- Be friendly, professional, and helpful
- If asked about something you don't know, politely say you don't have that information
- Keep responses concise and informative (2-4 sentences typically)
- Direct users to the contact section if they want to reach out directly
- Reference specific projects and skills when they're relevant to the question

Always be helpful and maintain a professional yet friendly tone."""


def _pluralize(count, word):
    return f"{count} {word}{'' if count == 1 else 's'}"


def _skills_of_type(skills, skill_type):
    return [s for s in skills if s.get("type") == skill_type]


def build_system_prompt(skills, works):
    """Persona plus the live skills and projects pulled from the database."""
    skills_info = ""
    dev_skills = _skills_of_type(skills, "development")
    design_skills = _skills_of_type(skills, "design")
    if dev_skills:
        skills_info += "\n\nDevelopment Skills:\n"
        skills_info += "".join(f"- {s['name']} ({s['percentage']}% proficiency)\n" for s in dev_skills)
    if design_skills:
        skills_info += "\nDesign Skills:\n"
        skills_info += "".join(f"- {s['name']} ({s['percentage']}% proficiency)\n" for s in design_skills)

    projects_info = ""
    if works:
        projects_info = "\n\nPortfolio Projects:\n"
        for index, project in enumerate(works, start=1):
            projects_info += f"{index}. {project['title']} ({project['category']})\n"
            description = project.get("description") or ""
            if description:
                suffix = "..." if len(description) > 150 else ""
                projects_info += f"   Description: {description[:150]}{suffix}\n"
            projects_info += f"   Likes: {project.get('likes', 0)}\n\n"

    return f"{PERSONA}{skills_info}{projects_info}\n\n{INSTRUCTIONS}"


def trim_history(history):
    """Keep the last turns with a known role and string content."""
    if not isinstance(history, list):
        return []
    turns = []
    for turn in history[-HISTORY_LIMIT:]:
        if not isinstance(turn, dict):
            continue
        role, content = turn.get("role"), turn.get("content")
        if role in HISTORY_ROLES and isinstance(content, str):
            turns.append({"role": role, "content": content})
    return turns


def _keyword_pattern(keywords, whole_word, plural=False):
    alternatives = "|".join(re.escape(k) for k in keywords)
    if whole_word:
        suffix = "s?" if plural else ""
        return re.compile(rf"\b(?:{alternatives}){suffix}\b")
    return re.compile(rf"\b(?:{alternatives})")


class RuleBasedChatbot:
    """Keyword classifier that answers when the OpenAI path is unavailable."""

    GREETINGS = ["hi", "hello", "hey", "greetings", "howdy",
                 "good morning", "good afternoon", "good evening"]
    ABOUT = ["about", "who are you", "who is", "introduce", "introduction",
             "background", "yourself"]
    SKILLS = ["skill", "tech", "language", "framework", "tool", "proficien",
              "stack", "what can", "what do you know"]
    SERVICES = ["service", "offer", "provide", "what do you do"]
    PROJECTS = ["project", "work", "portfolio", "built", "what have you done"]
    CONTACT = ["contact", "reach", "email", "phone", "get in touch", "hire", "collaborate"]
    EXPERIENCE = ["experience", "years"]
    WEB = ["web development", "web dev", "website", "web"]
    MOBILE = ["mobile", "app", "ios", "android"]
    DESIGN = ["ui", "ux", "design"]

    GREETING_RESPONSES = [
        "Hello! I'm here to help you learn about the portfolio owner. What would you like to know?",
        "Hi there! Feel free to ask me anything about their skills, experience, or services.",
        "Hey! I can answer questions about the portfolio owner's background, skills, and work. What interests you?",
    ]

    DEFAULT_RESPONSES = [
        "I can help you learn about their background, skills, services, or work. What would you like to know?",
        "Feel free to ask me about their expertise, experience, services, or portfolio projects!",
        "I can answer questions about their skills, services, projects, or background. What interests you?",
    ]

    NO_SKILLS_RESPONSE = (
        "I don't have specific skill information available right now, but the portfolio owner "
        "has expertise in web development, mobile applications, and UI/UX design."
    )

    NO_PROJECTS_RESPONSE = (
        "I don't have specific project information available right now, but you can check out "
        "the Work section to see their portfolio projects."
    )

    CONTACT_RESPONSE = (
        "To get in touch with the portfolio owner, please use the Contact section on the website. "
        "You can send them a message directly through the contact form, and they'll get back to "
        "you as soon as possible!"
    )

    EXPERIENCE_RESPONSE = (
        "The portfolio owner has over 5 years of experience in web development, mobile applications, "
        "and UI/UX design. They have worked with various technologies and frameworks to deliver "
        "high-quality solutions."
    )

    WEB_RESPONSE = (
        "Web Development: High-quality development of sites at the professional level. They create "
        "professional, high-quality websites using modern technologies and best practices."
    )

    MOBILE_RESPONSE = (
        "Mobile Apps: Professional development of applications for iOS and Android. They develop "
        "native and cross-platform mobile applications."
    )

    DESIGN_RESPONSE = (
        "UI/UX Design: Modern and mobile-ready website that will help achieve marketing and "
        "business goals. They create modern, user-friendly designs."
    )

    def __init__(self, rng=None):
        self.rng = rng or random.Random()
        self._rules = [
            (_keyword_pattern(self.GREETINGS, whole_word=True), self.generate_greeting),
            (_keyword_pattern(self.ABOUT, whole_word=False), self.generate_about_response),
            (_keyword_pattern(self.SKILLS, whole_word=False), self.generate_skills_response),
            (_keyword_pattern(self.SERVICES, whole_word=False), self.generate_services_response),
            (_keyword_pattern(self.PROJECTS, whole_word=False), self.generate_projects_response),
            (_keyword_pattern(self.CONTACT, whole_word=False), self.generate_contact_response),
            (_keyword_pattern(self.EXPERIENCE, whole_word=False), lambda skills, works: self.EXPERIENCE_RESPONSE),
            (_keyword_pattern(self.WEB, whole_word=True, plural=True), lambda skills, works: self.WEB_RESPONSE),
            (_keyword_pattern(self.MOBILE, whole_word=True, plural=True), lambda skills, works: self.MOBILE_RESPONSE),
            (_keyword_pattern(self.DESIGN, whole_word=True, plural=True), lambda skills, works: self.DESIGN_RESPONSE),
        ]

    @staticmethod
    def normalize_text(text):
        return re.sub(r"[^\w\s]", "", text.lower().strip())

    def generate_greeting(self, skills=None, works=None):
        return self.rng.choice(self.GREETING_RESPONSES)

    def generate_about_response(self, skills, works):
        top_skills = ", ".join(s["name"] for s in skills[:5]) or "various modern technologies"
        return (
            "The portfolio owner is a passionate technician with over 5 years of experience in the "
            "industry. They specialize in web development, mobile applications, and UI/UX design. "
            f"They have worked on {_pluralize(len(works), 'project')} and are skilled in technologies "
            f"like {top_skills}. They deliver high-quality solutions using various technologies and frameworks."
        )

    def generate_skills_response(self, skills, works=None):
        if not skills:
            return self.NO_SKILLS_RESPONSE

        response = "Here are the skills:\n\n"
        dev_skills = _skills_of_type(skills, "development")
        design_skills = _skills_of_type(skills, "design")
        if dev_skills:
            response += "Development Skills:\n"
            response += "".join(f"• {s['name']} ({s['percentage']}%)\n" for s in dev_skills[:5])
        if design_skills:
            response += "\nDesign Skills:\n"
            response += "".join(f"• {s['name']} ({s['percentage']}%)\n" for s in design_skills[:5])
        return response.strip()

    def generate_services_response(self, skills=None, works=None):
        services = "\n".join(f"{i}. {service}" for i, service in enumerate(SERVICES, start=1))
        return (
            f"The portfolio owner offers the following services:\n\n{services}\n\n"
            "Feel free to ask about any specific service or check out the portfolio section for "
            "examples of their work!"
        )

    def generate_projects_response(self, skills, works):
        if not works:
            return self.NO_PROJECTS_RESPONSE

        response = f"They have worked on {_pluralize(len(works), 'project')}. Here are some examples:\n\n"
        for index, project in enumerate(works[:3], start=1):
            response += f"{index}. {project['title']} ({project['category']})\n"
            if project.get("description"):
                response += f"   {project['description'][:100]}...\n"
            response += "\n"
        response += "You can view more details about these projects in the Work section of the portfolio!"
        return response

    def generate_contact_response(self, skills=None, works=None):
        return self.CONTACT_RESPONSE

    def generate_default_response(self):
        return self.rng.choice(self.DEFAULT_RESPONSES)

    def process_message(self, message, skills, works):
        normalized = self.normalize_text(message)
        for pattern, responder in self._rules:
            if pattern.search(normalized):
                return responder(skills, works)
        return self.generate_default_response()


def load_portfolio_context():
    """Top skills by percentage and the newest works, as plain dicts."""
    from portfolio.services.content import SkillService, WorkService

    skills = [s.to_dict() for s in SkillService.top_skills(limit=CONTEXT_SKILL_LIMIT)]
    works = [w.to_dict() for w in WorkService.list(limit=CONTEXT_WORK_LIMIT)]
    return skills, works


class ChatResponder:
    """
    Answers chat messages, preferring the OpenAI completion path.

    Rate limit failures trip the injected circuit breaker so later requests
    go straight to the rule-based chatbot; other failures only affect the
    current request.
    """

    def __init__(self, completion_client=None, breaker=None, rng=None,
                 context_loader=load_portfolio_context):
        self.completion_client = completion_client
        self.breaker = breaker or CircuitBreaker()
        self.chatbot = RuleBasedChatbot(rng=rng)
        self.context_loader = context_loader

    @property
    def remote_configured(self):
        return self.completion_client is not None and self.completion_client.is_configured

    def load_context(self):
        try:
            return self.context_loader()
        except Exception as e:
            logger.error(f"❌ Error fetching portfolio data for chatbot: {e}")
            return [], []

    def try_remote(self, message, history, skills, works):
        if not self.remote_configured or not self.breaker.allow_request():
            return None

        messages = [{"role": "system", "content": build_system_prompt(skills, works)}]
        messages += trim_history(history)
        messages.append({"role": "user", "content": message})

        try:
            text = self.completion_client.complete(messages)
        except Exception as e:
            if is_quota_error(e):
                logger.warning("⚠️ OpenAI quota exceeded, falling back to rule-based chatbot")
                self.breaker.trip()
            else:
                logger.error(f"❌ OpenAI error, falling back to rule-based chatbot: {e}")
            return None

        self.breaker.record_success()
        return text

    def respond(self, message, history=None):
        if not isinstance(message, str) or not message.strip():
            raise ValidationError("Message is required")
        message = message.strip()

        skills, works = self.load_context()

        text = self.try_remote(message, history, skills, works)
        if text is not None:
            return {"response": text, "success": True, "mode": MODE_REMOTE}

        logger.info("🤖 Using rule-based chatbot (fallback mode)")
        return {
            "response": self.chatbot.process_message(message, skills, works),
            "success": True,
            "mode": MODE_RULE_BASED,
        }

    def status(self):
        return {
            "configured": self.remote_configured,
            "circuit": self.breaker.state,
            "mode": MODE_REMOTE if self.remote_configured and not self.breaker.is_open else MODE_RULE_BASED,
        }
