"""
Console booking form: fills and submits a booking from the terminal.

Runs the real validator, interval derivation and submission controller.
By default the booking service is simulated in-process, so no backend is
needed. Pass ``--live`` to post to the configured BOOKING_API_URL.

Usage:
    python console_demo.py
    python console_demo.py --scenario booking
    python console_demo.py --scenario invalid
    python console_demo.py --live
"""

import argparse
import asyncio
import json
from datetime import date, timedelta
from typing import Optional

import httpx

from booking_intake.catalog import describe_service
from booking_intake.client.booking_client import BookingClient
from booking_intake.client.credentials import SessionFileCredentialProvider
from booking_intake.config import settings
from booking_intake.controller.submission import BookingSubmissionController
from booking_intake.utils import describe_date
from booking_intake.validation import OCCASION_TYPES

BLUE = "\033[94m"
GREEN = "\033[92m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"


def _simulated_backend(request: httpx.Request) -> httpx.Response:
    """In-process stand-in for ``POST /bookings``."""
    body = json.loads(request.content)
    if body.get("phone") == "000":
        return httpx.Response(409, json={"message": "This slot has just been taken."})
    return httpx.Response(
        201,
        json={"message": f"Thanks {body['name']}, your booking request was received."},
    )


def build_client(live: bool) -> BookingClient:
    credentials = SessionFileCredentialProvider(
        settings.session.session_file, settings.session.storage_key
    )
    if live:
        return BookingClient(credentials=credentials)
    return BookingClient(
        credentials=credentials, transport=httpx.MockTransport(_simulated_backend)
    )


class ConsoleSession:
    """Walks one booking form through the terminal."""

    MAX_INPUT_LENGTH = 500

    def __init__(self, client: BookingClient) -> None:
        self.client = client
        self.form = BookingSubmissionController(client)

    def say(self, text: str) -> None:
        print(f"{GREEN}{text}{RESET}")

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def _next_open_date(self) -> date:
        day = self.form.availability.min_selectable + timedelta(days=7)
        while not self.form.availability.is_selectable(day):
            day += timedelta(days=1)
        return day

    # Pre-scripted scenarios for --scenario flag; values are field answers
    def _scenarios(self) -> dict[str, dict[str, str]]:
        portrait = self.form.services[1].id
        good = {
            "name": "Asha Rao",
            "email": "asha@example.com",
            "phone": "+91 98765 43210",
            "selected_service": portrait,
            "selected_date": self._next_open_date().isoformat(),
            "selected_time": "10:00 AM",
            "occasion": "Birthday",
            "notes": "Outdoor shots if the weather allows",
        }
        return {
            "booking": good,
            "invalid": {**good, "name": "", "email": "not-an-email", "occasion": ""},
            "unknown_service": {**good, "selected_service": "no-such-service"},
            "rejected": {**good, "phone": "000"},
        }

    def _print_banner(self, title: str) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {settings.app_name.upper()} - {title}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")
        print()

    def _print_outcome(self) -> None:
        status = self.form.status
        for field_name, message in self.form.errors.items():
            print(f"{RED}  {field_name}: {message}{RESET}")
        if status.message:
            colour = RED if status.is_error else GREEN
            print(f"{colour}{BOLD}{status.message}{RESET}")
        if self.form.last_request is not None:
            self.system_log(f"Payload: {self.form.last_request.to_payload()}")
        self.system_log(f"State trace: {' -> '.join(self.form.state_machine.get_state_trace())}")

    def _apply(self, field_name: str, value: str) -> None:
        if field_name == "selected_date":
            picked = date.fromisoformat(value)
            if not self.form.on_date_selected(picked):
                self.system_log(f"Picker refused {value}; entering it directly")
                self.form.update_field("selected_date", picked)
            return
        self.form.update_field(field_name, value)

    async def run_scenario(self, scenario: str) -> None:
        """Auto-play a pre-scripted scenario for demo purposes."""
        answers = self._scenarios().get(scenario)
        if answers is None:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")
            return

        self._print_banner(f"Scenario: {scenario}")
        for field_name, value in answers.items():
            print(f"{BLUE}{field_name}{RESET}: {value}")
            self._apply(field_name, value)

        await self.form.submit()
        print()
        self._print_outcome()

    # ------------------------------------------------------------------ #
    # Interactive form
    # ------------------------------------------------------------------ #

    def _ask(self, prompt: str) -> str:
        answer = input(f"{BLUE}{prompt}{RESET} ").strip()
        if len(answer) > self.MAX_INPUT_LENGTH:
            self.say("That was quite long; keeping the first part only.")
            answer = answer[: self.MAX_INPUT_LENGTH]
        return answer

    def _choose(self, prompt: str, options: list[str]) -> Optional[int]:
        for i, option in enumerate(options, start=1):
            print(f"  {i}. {option}")
        answer = self._ask(prompt)
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return int(answer) - 1
        return None

    def _ask_date(self) -> None:
        while True:
            answer = self._ask(
                f"Preferred date (YYYY-MM-DD, from {self.form.availability.min_selectable}):"
            )
            if not answer:
                return
            try:
                picked = date.fromisoformat(answer)
            except ValueError:
                self.say("Please use the YYYY-MM-DD format.")
                continue
            if self.form.on_date_selected(picked):
                self.say(f"You selected: {describe_date(picked)}")
                return
            self.say(self.form.errors["selected_date"])

    def _fill_form(self) -> None:
        self.form.update_field("name", self._ask("Full name:"))
        self.form.update_field("email", self._ask("Email address:"))
        self.form.update_field("phone", self._ask("Phone number:"))

        services = self.form.services
        choice = self._choose("Service number:", [describe_service(s) for s in services])
        self.form.update_field("selected_service", services[choice].id if choice is not None else "")

        self._ask_date()

        slots = self.form.time_slots
        choice = self._choose("Time slot number:", slots)
        self.form.update_field("selected_time", slots[choice] if choice is not None else "")

        choice = self._choose("Occasion number:", list(OCCASION_TYPES))
        self.form.update_field("occasion", OCCASION_TYPES[choice] if choice is not None else "")

        self.form.update_field("notes", self._ask("Notes / special requests (optional):"))

    async def run(self) -> None:
        self._print_banner("Request Booking")
        while True:
            self._fill_form()
            await self.form.submit()
            print()
            self._print_outcome()
            if not self.form.status.is_error and not self.form.errors:
                return
            if self._ask("Try again? [y/N]").lower() not in ("y", "yes"):
                print(f"\n{DIM}Form closed.{RESET}")
                return


async def run_form(scenario: Optional[str], live: bool) -> None:
    async with build_client(live) as client:
        session = ConsoleSession(client)
        if scenario:
            await session.run_scenario(scenario)
        else:
            await session.run()


def main() -> None:
    parser = argparse.ArgumentParser(description="Console booking form")
    parser.add_argument(
        "--scenario",
        choices=["booking", "invalid", "unknown_service", "rejected"],
        default=None,
        help="Auto-play a pre-scripted scenario instead of interactive mode",
    )
    parser.add_argument(
        "--live",
        action="store_true",
        help="Post to the configured booking service instead of the simulated one",
    )
    args = parser.parse_args()
    asyncio.run(run_form(args.scenario, args.live))


if __name__ == "__main__":
    main()
