"""
InfoRetrievalAgent - 정보 안내 전담 에이전트

데모 모드로 동작하며 실시간 외부 데이터 소스에는 접근하지 않습니다.
"""

from datetime import datetime

from ...core.agent_request import AgentRequest
from ...core.base_agent import BaseAgent

ABOUT_GARVIS = """Garvis is a Slack-based AI assistant that can spawn specialized agents to handle different types of tasks. I'm designed to be modular and extensible, routing requests to the most appropriate agent for processing.

My key features:
• Intelligent task routing to specialized agents
• Slack integration with mentions, DMs, and slash commands
• Modular architecture for easy extension

How can I help you today?"""

WEATHER_TEXT = """I don't currently have access to real-time weather data, but I can help you with other information requests.

To get weather information, you could:
• Check your local weather app
• Visit weather.com or weather.gov

Is there something else I can help you with?"""

HELP_TEXT = """Here are some ways to interact with me:

*Direct Questions:*
• "What is [topic]?" - Get information about a topic
• "Explain [concept]" - Get detailed explanations
• "Tell me about [subject]" - Learn about subjects

*Available Agents:*
• Info Retrieval (me) - Questions and information
• Task Manager - Todo lists and reminders
• Code Helper - Programming assistance

*Commands:*
• Type "help" for full agent capabilities
• Type "status" for system information

What would you like to know more about?"""


class InfoRetrievalAgent(BaseAgent):
    """
    정보 안내 전담 에이전트

    사용법:
        agent = InfoRetrievalAgent()
        await agent.initialize()
        response = await agent.execute(AgentRequest(..., content="what is garvis?"))
    """

    name = "InfoRetrieval"
    description = "Provides information and answers questions about various topics"
    capabilities = ("search", "question-answering", "definitions", "explanations")
    keywords = (
        "what is",
        "what are",
        "explain",
        "define",
        "tell me about",
        "information about",
        "search for",
        "find",
        "lookup",
        "how does",
        "why",
        "when",
        "where",
    )

    async def _execute_internal(self, request: AgentRequest) -> str:
        content = request.content.lower()

        if "what is garvis" in content or "about garvis" in content:
            return ABOUT_GARVIS

        if "time" in content or "date" in content:
            now = datetime.now().astimezone()
            return (
                f"The current date and time is: {now.strftime('%Y-%m-%d %H:%M:%S')}\n\n"
                f"Timezone: {now.tzname()}"
            )

        if "weather" in content:
            return WEATHER_TEXT

        if "help" in content or "commands" in content:
            return HELP_TEXT

        return (
            f'I\'d be happy to help you find information about "{request.content}"!\n\n'
            "However, I'm currently running in demonstration mode with limited knowledge "
            "access. For now, I can help you with:\n"
            "• General questions about Garvis\n"
            "• Current time and date\n"
            "• System status and capabilities\n"
            "• Routing to other specialized agents\n\n"
            "Is there a specific aspect you'd like to explore?"
        )
