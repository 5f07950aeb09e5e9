"""
CodeHelperAgent - 프로그래밍 도움말 전담 에이전트

코드 리뷰, 디버깅, 문서화, 테스트, Git, 언어별 가이드를 제공합니다.
"""

from ...core.agent_request import AgentRequest
from ...core.base_agent import BaseAgent

CODE_REVIEW_TEXT = """🔍 **Code Review Assistant**

I'd be happy to help review your code! Here's how I can assist:

**What to include for a good review:**
• Code snippet or file content
• Context about what the code should do
• Specific concerns or areas to focus on
• Programming language being used

**I can help with:**
• Code quality and best practices
• Performance optimizations
• Security considerations
• Readability improvements

Please share your code and I'll provide detailed feedback!"""

ERROR_ANALYSIS_TEXT = """🐛 **Debugging Help - Error Analysis**

To help you debug effectively, please share:
• The exact error message
• Stack trace (if available)
• Code that's causing the error
• What you expected vs. what happened

**Common debugging steps:**
1. **Read the error message carefully** - it often tells you exactly what's wrong
2. **Check line numbers** - look at the specific line mentioned
3. **Verify variable types** - ensure data types match expectations
4. **Test with simple inputs** - isolate the problem

Share your error details and I'll help you solve it!"""

DEBUGGING_TEXT = """🐛 **Debugging Assistant**

**Common Issues I Help With:**
• Syntax errors and typos
• Logic errors in algorithms
• Runtime errors and exceptions
• Performance problems

**To get the best help:**
1. Share the problematic code
2. Describe the expected behavior
3. Explain what's actually happening
4. Include any error messages

What specific debugging challenge are you facing?"""

DOCUMENTATION_TEXT = """📝 **Documentation Helper**

**Types of Documentation:**
• **Inline Comments** - Explain complex logic
• **Function Documentation** - Parameters, return values, examples
• **API Documentation** - Endpoints, request/response formats
• **README Files** - Project setup and usage instructions

**Documentation Formats:**
• **JavaScript/TypeScript**: JSDoc comments
• **Python**: Docstrings and type hints
• **Java**: Javadoc comments

What kind of documentation do you need help with?"""

TESTING_TEXT = """🧪 **Testing Assistant**

**Types of Testing:**
• **Unit Tests** - Test individual functions/components
• **Integration Tests** - Test component interactions
• **End-to-End Tests** - Test complete user workflows

**Popular Testing Frameworks:**
• **JavaScript**: Jest, Mocha, Cypress, Playwright
• **Python**: pytest, unittest
• **Java**: JUnit, TestNG, Mockito

What testing challenge can I help you with?"""

GIT_COMMIT_TEXT = """📋 **Git Commit Help**

**Good Commit Message Format:**
```
type: short description

Longer explanation if needed
```

**Common Types:** feat, fix, docs, style, refactor, test, chore

**Best Practices:**
• Keep first line under 50 characters
• Use imperative mood ("add" not "added")
• Reference issue numbers when applicable"""

GIT_TEXT = """🔧 **Git Help**

**Common Git Commands:**
```bash
git status              # Check current state
git add .               # Stage changes
git commit -m "message" # Commit changes
git push                # Push to remote
git checkout -b name    # Create and switch branch
```

What Git challenge are you facing?"""

LANGUAGE_TEXTS = {
    "javascript": """🟨 **JavaScript Help**

**I can help with:**
• ES6+ features (arrow functions, async/await, destructuring)
• Promises and async programming
• Array/Object methods
• Module systems (ES modules, CommonJS)

What JavaScript concept can I help clarify?""",
    "typescript": """🔷 **TypeScript Help**

**Key TypeScript Features:**
• Type annotations and inference
• Interfaces and type aliases
• Generics for reusable code
• Union and intersection types

What TypeScript feature do you need help with?""",
    "react": """⚛️ **React Help**

**React Concepts I Can Help With:**
• Components and props
• Hooks (useState, useEffect, custom hooks)
• Context API and state management
• Forms and controlled components

What React challenge are you working on?""",
    "node": """🟢 **Node.js Help**

**Node.js Core Concepts:**
• Event-driven, non-blocking I/O
• NPM package management
• HTTP servers and APIs
• Environment variables

What Node.js topic can I help with?""",
}

GENERAL_TEXT = """💻 **Programming Assistant**

**Code Analysis & Review:**
• Code quality improvement
• Performance optimization
• Refactoring guidance

**Debugging Support:**
• Error message interpretation
• Logic error identification
• Testing strategies

**To get the best help:**
1. Share your specific code or error
2. Explain what you're trying to achieve
3. Mention the programming language

What programming challenge can I help you solve today?"""


class CodeHelperAgent(BaseAgent):
    """
    프로그래밍 도움말 전담 에이전트

    분기 순서: 리뷰 → 디버깅 → 문서화 → 테스트 → Git → 언어별 → 일반
    """

    name = "CodeHelper"
    description = "Assists with code review, debugging, and programming questions"
    capabilities = ("code-review", "debugging", "documentation", "programming-help")
    keywords = (
        "code",
        "debug",
        "bug",
        "error",
        "function",
        "class",
        "variable",
        "javascript",
        "typescript",
        "python",
        "java",
        "react",
        "node",
        "npm",
        "git",
        "review",
        "refactor",
        "optimize",
        "algorithm",
        "documentation",
        "comment",
        "test",
        "testing",
        "unit test",
    )

    async def _execute_internal(self, request: AgentRequest) -> str:
        content = request.content.lower()

        if "review" in content or "check my code" in content:
            return CODE_REVIEW_TEXT

        if "debug" in content or "error" in content or "bug" in content:
            if "error message" in content or "stack trace" in content:
                return ERROR_ANALYSIS_TEXT
            return DEBUGGING_TEXT

        if "document" in content or "comment" in content:
            return DOCUMENTATION_TEXT

        if "test" in content:
            return TESTING_TEXT

        if "git" in content or "commit" in content or "branch" in content:
            if "commit" in content:
                return GIT_COMMIT_TEXT
            return GIT_TEXT

        if "javascript" in content or "js" in content:
            return LANGUAGE_TEXTS["javascript"]

        if "typescript" in content or "ts" in content:
            return LANGUAGE_TEXTS["typescript"]

        if "react" in content:
            return LANGUAGE_TEXTS["react"]

        if "node" in content or "npm" in content:
            return LANGUAGE_TEXTS["node"]

        return GENERAL_TEXT
