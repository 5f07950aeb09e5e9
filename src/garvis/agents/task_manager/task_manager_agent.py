"""
TaskManagerAgent - 할 일 관리 전담 에이전트

사용자별 할 일 목록을 프로세스 메모리에 보관합니다.

주요 기능:
- 할 일 추가 ("add task: ...")
- 목록 조회 ("list tasks")
- 완료 처리 ("complete 1a2b3c4d")
- 삭제 ("delete 1a2b3c4d")
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional
import re

from ...core.agent_request import AgentRequest
from ...core.base_agent import BaseAgent

ADD_TASK_PATTERNS = [
    re.compile(r"add task[:\s]+(.+)", re.IGNORECASE),
    re.compile(r"create task[:\s]+(.+)", re.IGNORECASE),
    re.compile(r"new task[:\s]+(.+)", re.IGNORECASE),
]
COMPLETE_TASK_PATTERN = re.compile(r"(?:complete|done|finish)\s+([a-f0-9]{8})", re.IGNORECASE)
DELETE_TASK_PATTERN = re.compile(r"(?:delete|remove)\s+([a-f0-9]{8})", re.IGNORECASE)

TASK_HELP_TEXT = """📋 **Task Manager Help**

**📝 Creating Tasks:**
• "add task: [description]" - Create a new task
• "create task: [description]" - Same as above
• "new task: [description]" - Also creates a task

**📋 Managing Tasks:**
• "list tasks" or "my tasks" - Show all your tasks
• "complete [task ID]" - Mark a task as done
• "delete [task ID]" - Remove a task permanently

**📌 Tips:**
• Each task gets a unique 8-character ID
• Tasks are stored per user (your tasks are private)
• Completed tasks remain in your list until deleted"""


@dataclass
class Task:
    """할 일 항목"""

    id: str
    title: str
    completed: bool = False
    created_at: datetime = field(default_factory=datetime.now)
    description: Optional[str] = None
    due_date: Optional[datetime] = None

    @property
    def short_id(self) -> str:
        return self.id[:8]


class TaskManagerAgent(BaseAgent):
    """
    할 일 관리 전담 에이전트

    할 일 저장소는 이 인스턴스만 소유합니다. 디스패처는 접근하지 않습니다.
    """

    name = "TaskManager"
    description = "Manages tasks, reminders, and todo lists"
    capabilities = ("task-creation", "task-management", "reminders", "todo-lists")
    keywords = (
        "task",
        "todo",
        "remind",
        "reminder",
        "schedule",
        "add task",
        "create task",
        "list tasks",
        "my tasks",
        "complete task",
        "done",
        "finish",
        "delete task",
        "remove task",
    )

    def __init__(self) -> None:
        super().__init__()
        self._tasks: Dict[str, List[Task]] = {}  # user_id -> tasks

    def get_tasks(self, user_id: str) -> List[Task]:
        """사용자 할 일 목록 (복사본)"""
        return list(self._tasks.get(user_id, []))

    async def cleanup(self) -> None:
        await super().cleanup()
        self._tasks.clear()

    async def _execute_internal(self, request: AgentRequest) -> str:
        content = request.content.lower()
        user_tasks = self._tasks.setdefault(request.user_id, [])

        if any(cmd in content for cmd in ("add task", "create task", "new task")):
            return self._handle_add_task(request.content, user_tasks)

        if any(cmd in content for cmd in ("list tasks", "my tasks", "show tasks")):
            return self._handle_list_tasks(user_tasks)

        if any(cmd in content for cmd in ("complete", "done", "finish")):
            return self._handle_complete_task(content, user_tasks)

        if "delete" in content or "remove" in content:
            return self._handle_delete_task(content, user_tasks)

        if "help" in content or "how to" in content:
            return TASK_HELP_TEXT

        return self._handle_general_query(user_tasks)

    # ─────────────────────────────────────────────────────────────────
    # Commands
    # ─────────────────────────────────────────────────────────────────

    def _handle_add_task(self, content: str, user_tasks: List[Task]) -> str:
        match = None
        for pattern in ADD_TASK_PATTERNS:
            match = pattern.search(content)
            if match:
                break

        if not match or not match.group(1).strip():
            return (
                "I'd be happy to add a task for you! Please use the format:\n"
                '"add task: [task description]"\n\n'
                "For example:\n"
                '• "add task: Review project proposal"\n'
                '• "create task: Call client about meeting"'
            )

        task = Task(id=self.generate_id(), title=match.group(1).strip())
        user_tasks.append(task)
        self.logger.debug(f"Task added: {task.short_id}")

        return (
            "✅ Task added successfully!\n\n"
            f"**{task.title}**\n"
            f"Created: {task.created_at.strftime('%Y-%m-%d %H:%M')}\n"
            f"ID: {task.short_id}\n\n"
            f'You now have {len(user_tasks)} task(s). Type "list tasks" to see all your tasks.'
        )

    def _handle_list_tasks(self, user_tasks: List[Task]) -> str:
        if not user_tasks:
            return (
                "📋 You don't have any tasks yet!\n\n"
                "To get started, try:\n"
                '• "add task: [description]" - Create a new task\n\n'
                'Need help? Just ask "task help" for more options.'
            )

        pending = [t for t in user_tasks if not t.completed]
        completed = [t for t in user_tasks if t.completed]

        lines = [f"📋 **Your Tasks** ({len(user_tasks)} total)", ""]

        if pending:
            lines.append(f"**📝 Pending ({len(pending)}):**")
            for index, task in enumerate(pending, start=1):
                lines.append(f"{index}. **{task.title}**")
                lines.append(
                    f"   ID: {task.short_id} | Created: {task.created_at.strftime('%Y-%m-%d')}"
                )
            lines.append("")

        if completed:
            lines.append(f"**✅ Completed ({len(completed)}):**")
            for index, task in enumerate(completed, start=1):
                lines.append(f"{index}. ~~{task.title}~~")
                lines.append(f"   ID: {task.short_id}")
            lines.append("")

        lines.append('💡 *Tip: Use "complete [task ID]" or "delete [task ID]" to manage tasks*')
        return "\n".join(lines)

    def _handle_complete_task(self, content: str, user_tasks: List[Task]) -> str:
        match = COMPLETE_TASK_PATTERN.search(content)
        if not match:
            return (
                "To complete a task, please provide the task ID:\n"
                '"complete [task ID]"\n\n'
                'For example: "complete 1a2b3c4d"\n\n'
                'Use "list tasks" to see all your task IDs.'
            )

        prefix = match.group(1)
        task = next((t for t in user_tasks if t.id.startswith(prefix)), None)

        if task is None:
            return (
                f'❌ Task not found with ID starting with "{prefix}".\n\n'
                'Use "list tasks" to see all your tasks and their IDs.'
            )

        if task.completed:
            return f'✅ Task "{task.title}" is already completed!'

        task.completed = True
        return (
            "🎉 Task completed!\n\n"
            f"**{task.title}**\n"
            f"Completed: {datetime.now().strftime('%Y-%m-%d %H:%M')}\n\n"
            'Great job! Type "list tasks" to see your remaining tasks.'
        )

    def _handle_delete_task(self, content: str, user_tasks: List[Task]) -> str:
        match = DELETE_TASK_PATTERN.search(content)
        if not match:
            return (
                "To delete a task, please provide the task ID:\n"
                '"delete [task ID]"\n\n'
                'For example: "delete 1a2b3c4d"\n\n'
                'Use "list tasks" to see all your task IDs.'
            )

        prefix = match.group(1)
        index = next((i for i, t in enumerate(user_tasks) if t.id.startswith(prefix)), None)

        if index is None:
            return (
                f'❌ Task not found with ID starting with "{prefix}".\n\n'
                'Use "list tasks" to see all your tasks and their IDs.'
            )

        deleted = user_tasks.pop(index)
        return (
            "🗑️ Task deleted successfully!\n\n"
            f"**{deleted.title}**\n\n"
            f"You now have {len(user_tasks)} task(s) remaining."
        )

    def _handle_general_query(self, user_tasks: List[Task]) -> str:
        pending_count = sum(1 for t in user_tasks if not t.completed)
        return (
            "📋 **Task Manager**\n\n"
            "**Your Current Status:**\n"
            f"• Total tasks: {len(user_tasks)}\n"
            f"• Pending: {pending_count}\n"
            f"• Completed: {len(user_tasks) - pending_count}\n\n"
            "**Quick Actions:**\n"
            '• "add task: [description]" - Create new task\n'
            '• "list tasks" - See all tasks\n'
            '• "task help" - Get detailed help\n\n'
            "What would you like to do with your tasks?"
        )
