"""
main.py

Main entry point for the ABCU Advising Assistant.
Console menu for loading the course catalog and looking up courses.
"""

import os
from advising.advisor import AdvisingAssistant
from advising.errors import AdvisingError
from advising.validators import validate_catalog

# --- Configuration ---
DATA_DIR = "data"
DEFAULT_COURSE_FILE = os.path.join(DATA_DIR, "Program_Input.csv")
DEFAULT_DATABASE_FILE = os.path.join(DATA_DIR, "ABCU.db")

MENU_TEXT = (
    "=============================\n"
    "ABCU Advising Assistant\n"
    "1. Load Data Structure\n"
    "2. Print Course List\n"
    "3. Print Course\n"
    "4. Enter Custom File Name\n"
    "5. Load Data from SQL Database\n"
    "6. Check Catalog\n"
    "9. Exit\n"
    "============================="
)


def display_menu():
    print(MENU_TEXT)


def print_course_list(assistant: AdvisingAssistant):
    for course in assistant.course_list():
        print(assistant.format_course_line(course))


def print_course(assistant: AdvisingAssistant, code: str):
    course = assistant.get_course(code)
    print(assistant.format_course_details(course))


def handle_selection(assistant: AdvisingAssistant, selection: str, input_fn=input) -> bool:
    """
    Runs one menu command. Returns False when the user asked to exit.
    Errors from the advising package propagate to the caller.
    """
    if selection in ("1", "4"):
        filename = DEFAULT_COURSE_FILE
        if selection == "4":
            filename = input_fn("Enter filename: ").strip()
        assistant.load(filename)
        print(f"Success: Data loaded from {filename}")

    elif selection == "2":
        print_course_list(assistant)

    elif selection == "3":
        code = input_fn("What course code? ")
        print_course(assistant, code)

    elif selection == "5":
        assistant.load_database(DEFAULT_DATABASE_FILE)
        print(f"Success: Data loaded from {DEFAULT_DATABASE_FILE}")

    elif selection == "6":
        validate_catalog(assistant.table)

    elif selection == "9":
        return False

    else:
        print("Invalid selection.")

    return True


def main(input_fn=input):
    """
    Main menu loop. One command per iteration until Exit or end of input.
    """
    assistant = AdvisingAssistant()

    while True:
        display_menu()
        try:
            selection = input_fn("Selection: ").strip()
        except EOFError:
            break

        try:
            if not handle_selection(assistant, selection, input_fn):
                break
        except AdvisingError as e:
            # Reported without leaving the menu loop.
            print(f"SYSTEM ERROR: {e}")
        except EOFError:
            break
        print()

    print("Goodbye.")


if __name__ == "__main__":
    main()
