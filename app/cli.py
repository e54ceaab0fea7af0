"""
TaggedFS command line interface

    taggedfs tag add NAME COLOR [-p PARENT_ID ...]
    taggedfs tag ls
    taggedfs tag edit TAG_ID [--name NAME] [--color COLOR] [-p PARENT_ID|null ...]
    taggedfs tag rm TAG_ID
    taggedfs tag order TAG_ID ...
    taggedfs file add PATH [TAG_ID ...]
    taggedfs file ls [--name NAME] [--tags TAG_ID ...]
    taggedfs file edit PATH [TAG_ID ...]
    taggedfs file rm PATH
"""
import argparse
import logging
import os
import sys

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from exceptions import TaggedFSException


def _existing_file(value):
    if not os.path.isfile(value):
        raise argparse.ArgumentTypeError(f"File '{value}' does not exist")
    return value


def _parent_id(value):
    """Integer tag id, or None for 'null' (detach from all parents)"""
    if value.lower() == "null":
        return None
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid tag id: '{value}'")


def build_parser():
    parser = argparse.ArgumentParser(prog="taggedfs", description="Hierarchical file tagging")
    parser.add_argument("-d", "--db", help="Database file (defaults to the configured database.path)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show log output")
    groups = parser.add_subparsers(dest="group", required=True)

    tag = groups.add_parser("tag", help="Tag commands").add_subparsers(dest="command", required=True)

    p = tag.add_parser("add", help="Add a tag")
    p.add_argument("name")
    p.add_argument("color", help="Hex color code, #RRGGBB")
    p.add_argument("-p", "--parent-id", dest="parent_ids", type=int, action="append", help="Id of a parent tag")

    tag.add_parser("ls", help="List all tags")

    p = tag.add_parser("edit", help="Edit a tag")
    p.add_argument("tag_id", type=int)
    p.add_argument("--name")
    p.add_argument("--color", help="Hex color code, #RRGGBB")
    p.add_argument(
        "-p", "--parent-id", dest="parent_ids", type=_parent_id, action="append",
        help="Id of a parent tag; repeat for several, 'null' for none",
    )

    p = tag.add_parser("rm", help="Delete a tag")
    p.add_argument("tag_id", type=int)

    p = tag.add_parser("order", help="Set display order")
    p.add_argument("tag_ids", type=int, nargs="+")

    file_ = groups.add_parser("file", help="File commands").add_subparsers(dest="command", required=True)

    p = file_.add_parser("add", help="Add a file")
    p.add_argument("path", type=_existing_file)
    p.add_argument("tag_ids", type=int, nargs="*")

    p = file_.add_parser("ls", help="List and search files (tags match their descendants too)")
    p.add_argument("--name", help="Search by name")
    p.add_argument("--tags", dest="tag_ids", type=int, nargs="+", help="Search by tags")

    p = file_.add_parser("edit", help="Replace a file's tags")
    p.add_argument("path")
    p.add_argument("tag_ids", type=int, nargs="*")

    p = file_.add_parser("rm", help="Delete a file")
    p.add_argument("path")

    return parser


def print_table(title, headers, rows, out=None):
    """Render rows as a rounded table; cell text is printed literally"""
    table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold")
    for header in headers:
        table.add_column(header, overflow="fold")
    for row in rows:
        table.add_row(*(escape(str(c)) for c in row))
    Console(file=out).print(table)


def run_command(args, store, out=None):
    from services.file_search import FileSearchEngine
    from services.file_service import FileService
    from services.file_tag_service import FileTagService
    from services.tag_service import TagService

    tags = TagService(store)
    files = FileService(store)
    command = (args.group, args.command)

    if command == ("tag", "add"):
        tag = tags.add_tag(args.name, args.color, args.parent_ids)
        print(f"Tag {tag.id} created", file=out)
    elif command == ("tag", "ls"):
        rows = [[t.id, t.name, t.color, ", ".join(map(str, t.parent_ids))] for t in tags.list_tags()]
        print_table("Tags", ["Id", "Name", "Color", "Parent Ids"], rows, out=out)
    elif command == ("tag", "edit"):
        parent_ids = None
        if args.parent_ids is not None:
            parent_ids = [p for p in args.parent_ids if p is not None]
        tags.edit_tag(args.tag_id, name=args.name, color=args.color, parent_ids=parent_ids)
        print(f"Tag {args.tag_id} updated", file=out)
    elif command == ("tag", "rm"):
        tags.delete_tag(args.tag_id)
        print(f"Tag {args.tag_id} deleted", file=out)
    elif command == ("tag", "order"):
        tags.reorder(args.tag_ids)
        print("Tags reordered", file=out)
    elif command == ("file", "add"):
        item = files.add_file(args.path, args.tag_ids)
        print(f"File {item.id} added: {item.path}", file=out)
    elif command == ("file", "ls"):
        found = FileSearchEngine(store).search(name=args.name, tag_ids=args.tag_ids)
        rows = [[f.id, f.path, f.name, ", ".join(t.name for t in f.tags)] for f in found]
        print_table("Files", ["Id", "Path", "Name", "Tags"], rows, out=out)
    elif command == ("file", "edit"):
        diff = FileTagService(store).update_file_tags(files.file_id_of(args.path), args.tag_ids)
        print(f"Tags added: {len(diff.to_add)}, removed: {len(diff.to_remove)}", file=out)
    elif command == ("file", "rm"):
        files.delete_file(files.file_id_of(args.path))
        print(f"File removed: {os.path.abspath(args.path)}", file=out)


def main(argv=None):
    args = build_parser().parse_args(argv)

    from app import create_app
    from db import db
    from repositories.store import SQLAlchemyStore

    if not args.verbose:
        logging.getLogger().setLevel(logging.ERROR)

    config = {}
    if args.db:
        config["SQLALCHEMY_DATABASE_URI"] = "sqlite:///" + os.path.abspath(args.db)

    app = create_app(config)
    with app.app_context():
        try:
            run_command(args, SQLAlchemyStore(db.session))
        except TaggedFSException as e:
            print(f"error: {e.message}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
