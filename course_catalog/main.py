import argparse
import logging

import duckdb

from course_catalog.catalog import CourseCatalog
from course_catalog.config import load_config
from course_catalog.display import format_detail, format_listing, format_load
from course_catalog.errors import CatalogError
from course_catalog.export_duckdb import export_catalog, print_tables


MENU = (
    "\n1) load data\n"
    "2) print course list\n"
    "3) print one course\n"
    "4) export to duckdb\n"
    "9) exit"
)


class CatalogShell:
    """Numbered-menu loop over a CourseCatalog.

    ``input_fn`` and ``out`` default to input/print; tests pass their own.
    """

    def __init__(self, catalog, export_path, input_fn=None, out=None):
        self.catalog = catalog
        self.export_path = export_path
        self.input_fn = input_fn or input
        self.out = out or print

    def ask(self, prompt):
        try:
            return self.input_fn(prompt)
        except EOFError:
            return None

    def emit(self, lines):
        for line in lines:
            self.out(line)

    def load(self):
        path = self.ask("enter filename: ")
        if path is None:
            return
        path = path.strip()
        if not path:
            self.out("no filename provided")
            return
        self.emit(format_load(self.catalog.load(path)))

    def list_courses(self):
        self.emit(format_listing(self.catalog.list_courses()))

    def show_course(self):
        raw = self.ask("course number: ")
        if raw is None:
            return
        self.emit(format_detail(self.catalog.show_course(raw)))

    def export(self):
        try:
            count = export_catalog(self.catalog, self.export_path)
        except CatalogError as e:
            self.out(str(e))
            return
        except (OSError, duckdb.Error) as e:
            self.out(f"export to {self.export_path} failed: {e}")
            return
        self.out(f"exported {count} course(s) to {self.export_path}")

    def run(self):
        actions = {
            1: self.load,
            2: self.list_courses,
            3: self.show_course,
            4: self.export,
        }
        self.out("welcome to the course planner.")
        while True:
            self.out(MENU)
            line = self.ask("choose: ")
            if line is None:
                break
            line = line.strip()

            option = int(line) if line.isdecimal() else 0
            if option == 9:
                self.out("goodbye!")
                break
            action = actions.get(option)
            if action:
                action()
            elif not line:
                self.out("no option entered")
            else:
                self.out(f"'{line}' isn't a valid option")


def build_parser():
    parser = argparse.ArgumentParser(description="Browse a course catalog loaded from a comma-separated file.")
    parser.add_argument("--file", help="catalog file to load before the menu starts")
    parser.add_argument("--config", help="JSON config file")
    parser.add_argument("--export", help="DuckDB file written by menu option 4")
    parser.add_argument("--dump", metavar="DB", help="print the tables of an exported DuckDB file and exit")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    settings = load_config(args.config)
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.WARNING))

    if args.dump:
        try:
            print_tables(args.dump)
        except (OSError, duckdb.Error) as e:
            print(f"Error reading {args.dump}: {e}")
            return 1
        return 0

    catalog = CourseCatalog()
    catalog_file = args.file or settings.catalog_file
    if catalog_file:
        result = catalog.load(catalog_file)
        for line in format_load(result):
            print(line)

    CatalogShell(catalog, args.export or settings.export_path).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
