"""
Okta update-user-by-id job.

Runs the action once outside the job runner, with the execution context
built from environment variables (and .env). Failures go through the
action's error handler and exit non-zero. Ctrl-C runs the halt handler.

Usage:
    ADDRESS=https://example.okta.com BEARER_AUTH_TOKEN=... \\
        python -m jobs.update_okta_user --user-id 00u1abcd --first-name Jane

    python -m jobs.update_okta_user --user-id 00u1abcd \\
        --additional-attributes '{"title": "Senior Engineer"}' --json
"""

import asyncio
import json
import logging
import sys
from typing import Any, Dict, Optional

import click
import httpx

from app.actions.update_user_by_id import UpdateUserByIdAction
from app.config import Settings
from common.actions.base import ActionContext
from common.utils.exceptions import ActionException, ConfigurationException
from common.utils.responses import success_response

logger = logging.getLogger(__name__)

EXIT_INTERRUPTED = 130


async def run_job(
    action: UpdateUserByIdAction,
    params: Dict[str, Any],
    context: ActionContext,
) -> Dict[str, Any]:
    """
    Invoke the action the way the job runner does.

    Returns:
        The invoke result

    Raises:
        Whatever invoke raised, after the error handler has seen it
    """
    try:
        return await action.invoke(params, context)
    except Exception as e:
        await action.error({**params, "error": e}, context)
        raise


def report_failure(error: ActionException, json_output: bool) -> None:
    """Print a failure as a JSON envelope or a one-line message, then exit 1."""
    if json_output:
        click.echo(json.dumps(error.to_dict(), indent=2))
    else:
        click.echo(f"Error: {error.message}", err=True)
    sys.exit(1)


def build_params(
    user_id: str,
    first_name: Optional[str],
    last_name: Optional[str],
    email: Optional[str],
    login: Optional[str],
    department: Optional[str],
    employee_number: Optional[str],
    additional_attributes: Optional[str],
    address: Optional[str],
) -> Dict[str, Any]:
    """Map CLI options onto job parameters, leaving out unset options."""
    params = {
        "userId": user_id,
        "firstName": first_name,
        "lastName": last_name,
        "email": email,
        "login": login,
        "department": department,
        "employeeNumber": employee_number,
        "additionalProfileAttributes": additional_attributes,
        "address": address,
    }
    return {k: v for k, v in params.items() if v is not None}


@click.command()
@click.option("--user-id", required=True, help="Okta userId of the user to update.")
@click.option("--first-name", default=None, help="New first name.")
@click.option("--last-name", default=None, help="New last name.")
@click.option("--email", default=None, help="New primary email.")
@click.option("--login", default=None, help="New login.")
@click.option("--department", default=None, help="New department.")
@click.option("--employee-number", default=None, help="New employee number.")
@click.option(
    "--additional-attributes",
    default=None,
    help="JSON object of extra profile attributes.",
)
@click.option("--address", default=None, help="Okta org URL (defaults to ADDRESS).")
@click.option("--json", "json_output", is_flag=True, help="Output raw JSON.")
def main(
    user_id: str,
    first_name: Optional[str],
    last_name: Optional[str],
    email: Optional[str],
    login: Optional[str],
    department: Optional[str],
    employee_number: Optional[str],
    additional_attributes: Optional[str],
    address: Optional[str],
    json_output: bool,
) -> None:
    """Update an Okta user's profile by userId."""
    settings = Settings()

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        settings.validate_required()
    except ValueError as e:
        report_failure(ConfigurationException(str(e)), json_output)

    params = build_params(
        user_id,
        first_name,
        last_name,
        email,
        login,
        department,
        employee_number,
        additional_attributes,
        address,
    )
    context = settings.to_context()
    action = UpdateUserByIdAction()

    try:
        result = asyncio.run(run_job(action, params, context))

    except KeyboardInterrupt:
        ack = asyncio.run(action.halt({**params, "reason": "interrupted"}, context))
        click.echo(json.dumps(ack, indent=2))
        sys.exit(EXIT_INTERRUPTED)

    except ActionException as e:
        report_failure(e, json_output)

    except httpx.HTTPError as e:
        click.echo(f"Error: request failed: {e}", err=True)
        sys.exit(1)

    logger.info(f"Okta user update job completed for userId: {user_id}")

    if json_output:
        click.echo(json.dumps(success_response(result, message="User updated"), indent=2))
        return

    click.echo("\n=== Okta User Update Results ===")
    click.echo(f"User ID: {result['id']}")
    click.echo(f"Status: {result['status']}")
    click.echo(f"Last Updated: {result['lastUpdated']}")
    for field, value in (result.get("profile") or {}).items():
        click.echo(f"  {field}: {value}")


if __name__ == "__main__":
    main()
