"""
Command-line front end for the Workout Tracker API.

Exercises are written as NAME:SETSxREPS[@WEIGHT], for example
"Squat:3x8@60" or "Pull Up:4x10".

    workout-tracker signup "Ann" ann@x.com
    workout-tracker login ann@x.com
    workout-tracker add "Leg Day" "Squat:3x8@60" "Lunge:3x12"
    workout-tracker list --search squat
    workout-tracker edit <id> "Leg Day" "Squat:5x5@80"
    workout-tracker edit <id> "Legs" --remove 2
    workout-tracker delete <id>
"""

import argparse
import getpass
import sys
from typing import List, Optional

import httpx

from client.api_client import ApiError, ApiUnavailable, WorkoutTrackerClient
from client.forms import (
    ExerciseForm,
    FormError,
    WorkoutForm,
    filter_workouts,
    from_workout,
    validate_login_form,
)
from client.session import SessionContext, SessionStore, bootstrap_session, login, logout, signup
from client.settings import ClientSettings, get_client_settings
from domain.models import Workout


EXERCISE_FORMAT = "NAME:SETSxREPS[@WEIGHT]"


def parse_exercise_spec(text: str) -> ExerciseForm:
    """
    Split "Squat:3x8@60" into form fields.

    Only the shape is checked here; numbers are parsed by WorkoutForm.to_payload.
    """
    name, sep, tail = text.rpartition(":")
    if not sep or not name.strip():
        raise FormError(f"Exercise '{text}' must look like {EXERCISE_FORMAT}")
    counts, _, weight = tail.partition("@")
    sets, sep, reps = counts.lower().partition("x")
    if not sep:
        raise FormError(f"Exercise '{text}' must look like {EXERCISE_FORMAT}")
    return ExerciseForm(name=name.strip(), sets=sets, reps=reps, weight=weight)


def build_workout_form(name: str, exercise_specs: List[str]) -> WorkoutForm:
    form = WorkoutForm(name=name, exercises=[])
    for spec in exercise_specs:
        form.add_exercise(parse_exercise_spec(spec))
    return form


def format_workout(workout: Workout) -> str:
    lines = [f"{workout.id}  {workout.name}  ({workout.created_at:%Y-%m-%d %H:%M})"]
    for exercise in workout.exercises:
        line = f"  - {exercise.name} {exercise.sets}x{exercise.reps}"
        if exercise.weight is not None:
            line += f" @ {exercise.weight:g}"
        lines.append(line)
    return "\n".join(lines)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workout-tracker",
        description="Track workouts against a Workout Tracker API",
    )
    parser.add_argument("--api-url", help="API base URL (default: WORKOUT_TRACKER_API_URL)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("signup", help="Create an account and log in")
    p.add_argument("name")
    p.add_argument("email")
    p.add_argument("--password", help="Password (prompted when omitted)")

    p = subparsers.add_parser("login", help="Log in with email and password")
    p.add_argument("email")
    p.add_argument("--password", help="Password (prompted when omitted)")

    subparsers.add_parser("logout", help="Forget the stored session")
    subparsers.add_parser("whoami", help="Show the logged-in user")

    p = subparsers.add_parser("list", help="List your workouts, newest first")
    p.add_argument("--search", default="", help="Filter by workout or exercise name")

    p = subparsers.add_parser("add", help="Create a workout")
    p.add_argument("name")
    p.add_argument("exercises", nargs="+", metavar="EXERCISE", help=EXERCISE_FORMAT)

    p = subparsers.add_parser("edit", help="Rename a workout or replace its exercises")
    p.add_argument("id")
    p.add_argument("name")
    p.add_argument(
        "exercises",
        nargs="*",
        metavar="EXERCISE",
        help=f"{EXERCISE_FORMAT}; the current exercises are kept when omitted",
    )
    p.add_argument(
        "--remove",
        type=int,
        action="append",
        default=[],
        metavar="N",
        help="Drop the Nth current exercise (repeatable)",
    )

    p = subparsers.add_parser("delete", help="Delete a workout")
    p.add_argument("id")

    return parser


def _password(args: argparse.Namespace) -> str:
    return args.password if args.password is not None else getpass.getpass("Password: ")


def _edit_form(
    args: argparse.Namespace, api: WorkoutTrackerClient, context: SessionContext
) -> Optional[WorkoutForm]:
    """
    Build the form for `edit`.

    New exercises replace the list outright. Without them the stored workout
    is loaded into the form, renamed, and stripped of any --remove positions.
    Returns None when the workout is not among the user's workouts.
    """
    if args.exercises:
        if args.remove:
            raise FormError("--remove cannot be combined with new exercises")
        return build_workout_form(args.name, args.exercises)

    current = next(
        (w for w in api.list_workouts(context.token) if w.id == args.id),
        None,
    )
    if current is None:
        return None

    form = from_workout(current)
    form.name = args.name
    # Highest first so earlier positions stay put
    for position in sorted(set(args.remove), reverse=True):
        form.remove_exercise(position - 1)
    return form


def _run(args: argparse.Namespace, api: WorkoutTrackerClient, store: SessionStore) -> int:
    if args.command == "signup":
        context = signup(store, api, args.name.strip(), args.email.strip(), _password(args))
        print(f"Welcome, {context.user.name}!")
        return 0

    if args.command == "login":
        password = _password(args)
        email = validate_login_form(args.email, password)
        context = login(store, api, email, password)
        print(f"Logged in as {context.user.email}")
        return 0

    if args.command == "logout":
        logout(store)
        print("Logged out")
        return 0

    context = bootstrap_session(store, api)
    if not context.is_authenticated:
        print("Not logged in. Run `workout-tracker login` first.", file=sys.stderr)
        return 1
    return _run_protected(args, api, context)


def _run_protected(args: argparse.Namespace, api: WorkoutTrackerClient, context: SessionContext) -> int:
    if args.command == "whoami":
        print(f"{context.user.name} <{context.user.email}>")
        return 0

    if args.command == "list":
        workouts = filter_workouts(api.list_workouts(context.token), args.search)
        if not workouts:
            print("No workouts found")
        for workout in workouts:
            print(format_workout(workout))
        return 0

    if args.command == "add":
        payload = build_workout_form(args.name, args.exercises).to_payload()
        workout = api.create_workout(context.token, payload["name"], payload["exercises"])
        print(format_workout(workout))
        return 0

    if args.command == "edit":
        form = _edit_form(args, api, context)
        if form is None:
            print("Workout not found", file=sys.stderr)
            return 1
        payload = form.to_payload()
        workout = api.update_workout(context.token, args.id, payload["name"], payload["exercises"])
        print(format_workout(workout))
        return 0

    if args.command == "delete":
        deleted_id = api.delete_workout(context.token, args.id)
        print(f"Workout deleted: {deleted_id}")
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(
    argv: Optional[List[str]] = None,
    settings: Optional[ClientSettings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> int:
    args = _build_parser().parse_args(argv)
    settings = settings or get_client_settings()
    store = SessionStore(settings.session_path)

    with WorkoutTrackerClient(
        args.api_url or settings.api_url,
        timeout=settings.timeout,
        transport=transport,
    ) as api:
        try:
            return _run(args, api, store)
        except (FormError, ApiError, ApiUnavailable) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1


if __name__ == "__main__":
    sys.exit(main())
