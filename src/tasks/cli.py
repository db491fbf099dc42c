#!/usr/bin/env python3
"""
タスク管理CLI - HTTPサーバーを介さずに同じTaskServiceを操作する

Usage:
    python -m src.tasks list [--format json|text]
    python -m src.tasks get --id ID [--format json|text]
    python -m src.tasks add --title "タイトル" --due-date YYYY-MM-DD[THH:MM] [--description "詳細"] [--status pending|in_progress|done]
    python -m src.tasks update --id ID --title "タイトル" --due-date YYYY-MM-DD [--description "詳細"] [--status pending|in_progress|done]
    python -m src.tasks delete --id ID
    python -m src.tasks search (--title T | --date YYYY-MM-DD | --status S)
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from .errors import InvalidArgumentError, TaskError
from .models import Task, TaskInput
from .repository import TaskRepository
from .service import TaskService, parse_status

STATUS_CHOICES = ["pending", "in_progress", "done"]


def format_task_text(task: Task) -> str:
    """タスクをテキスト形式で整形"""
    description = task.description.strip() or "説明なし"
    return (
        f"[{task.id}] {task.status.value} | 期限: {task.due_date.isoformat(sep=' ')} "
        f"| {task.title} | {description}"
    )


def format_task_json(task: Task) -> Dict[str, Any]:
    """タスクを辞書形式に変換"""
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "due_date": task.due_date.isoformat(),
        "status": task.status.value,
    }


def parse_datetime_arg(name: str, value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise InvalidArgumentError(name, f"{name} はISO形式で指定してください: {value}") from exc


def print_tasks(tasks: List[Task], output_format: str) -> None:
    if output_format == "json":
        print(json.dumps([format_task_json(task) for task in tasks], ensure_ascii=False))
    elif not tasks:
        print("タスクは登録されていません。")
    else:
        for task in tasks:
            print(format_task_text(task))


def print_task(task: Task, output_format: str, prefix: str = "") -> None:
    if output_format == "json":
        print(json.dumps(format_task_json(task), ensure_ascii=False))
    else:
        print(f"{prefix}{format_task_text(task)}")


def build_input(args: argparse.Namespace) -> TaskInput:
    return TaskInput(
        title=args.title,
        description=args.description,
        due_date=parse_datetime_arg("due_date", args.due_date),
        status=parse_status(args.status),
    )


def cmd_list(service: TaskService, args: argparse.Namespace) -> int:
    """全タスクを表示"""
    print_tasks(service.get_all(), args.format)
    return 0


def cmd_get(service: TaskService, args: argparse.Namespace) -> int:
    """特定のタスクを表示"""
    print_task(service.get_by_id(args.id), args.format)
    return 0


def cmd_add(service: TaskService, args: argparse.Namespace) -> int:
    """新しいタスクを追加"""
    created = service.create(build_input(args))
    print_task(created, args.format, prefix="追加しました: ")
    return 0


def cmd_update(service: TaskService, args: argparse.Namespace) -> int:
    """既存のタスクを置き換える"""
    updated = service.update(args.id, build_input(args))
    print_task(updated, args.format, prefix="更新しました: ")
    return 0


def cmd_delete(service: TaskService, args: argparse.Namespace) -> int:
    """タスクを削除"""
    service.delete(args.id)
    if args.format == "json":
        print(json.dumps({"deleted": True, "id": args.id}, ensure_ascii=False))
    else:
        print(f"削除しました: ID {args.id}")
    return 0


def cmd_search(service: TaskService, args: argparse.Namespace) -> int:
    """タイトル・期限日・ステータスで検索"""
    if args.title is not None:
        tasks = service.get_by_title(args.title)
    elif args.date is not None:
        tasks = service.get_by_date(parse_datetime_arg("date", args.date))
    else:
        tasks = service.get_by_status(args.status)
    print_tasks(tasks, args.format)
    return 0


COMMANDS: Dict[str, Callable[[TaskService, argparse.Namespace], int]] = {
    "list": cmd_list,
    "get": cmd_get,
    "add": cmd_add,
    "update": cmd_update,
    "delete": cmd_delete,
    "search": cmd_search,
}


def add_format_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="text",
        help="出力フォーマット（デフォルト: text）",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="タスク管理CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--db-path",
        type=str,
        help="SQLiteデータベースファイルのパス（デフォルト: data/tasks.db）",
    )

    subparsers = parser.add_subparsers(dest="command", help="実行するコマンド", required=True)

    parser_list = subparsers.add_parser("list", help="全タスクを表示")
    add_format_argument(parser_list)

    parser_get = subparsers.add_parser("get", help="特定のタスクを表示")
    parser_get.add_argument("--id", type=int, required=True, help="取得するタスクのID")
    add_format_argument(parser_get)

    for name, help_text in (("add", "新しいタスクを追加"), ("update", "既存のタスクを置き換える")):
        sub = subparsers.add_parser(name, help=help_text)
        if name == "update":
            sub.add_argument("--id", type=int, required=True, help="更新するタスクのID")
        sub.add_argument("--title", required=True, help="タスクのタイトル")
        sub.add_argument("--description", default="", help="タスクの詳細説明")
        sub.add_argument("--due-date", required=True, help="期限（YYYY-MM-DD[THH:MM]形式）")
        sub.add_argument(
            "--status",
            choices=STATUS_CHOICES,
            default="pending",
            help="ステータス（デフォルト: pending）",
        )
        add_format_argument(sub)

    parser_delete = subparsers.add_parser("delete", help="タスクを削除")
    parser_delete.add_argument("--id", type=int, required=True, help="削除するタスクのID")
    add_format_argument(parser_delete)

    parser_search = subparsers.add_parser("search", help="条件でタスクを検索")
    criteria = parser_search.add_mutually_exclusive_group(required=True)
    criteria.add_argument("--title", help="タイトルの部分一致（大文字小文字を区別しない）")
    criteria.add_argument("--date", help="期限日（YYYY-MM-DD形式、時刻は無視）")
    criteria.add_argument("--status", choices=STATUS_CHOICES, help="ステータス")
    add_format_argument(parser_search)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLIエントリポイント"""
    args = build_parser().parse_args(argv)

    repo = TaskRepository(db_path=args.db_path if args.db_path else None)
    service = TaskService(repo)

    try:
        return COMMANDS[args.command](service, args)
    except TaskError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
