#!/usr/bin/env python3

"""
Example script to lock or unlock a SESAME and wait for the command to finish.

Reads the access token (SESAME_AUTH_TOKEN) and the target device ID
(SESAME_DEVICE_ID) from environment variables.

Usage:
  export SESAME_AUTH_TOKEN="your_token"
  export SESAME_DEVICE_ID="your_device_id"
  python3 control_sesame.py lock
"""

import argparse
import asyncio
import logging
import os
import sys

from pysesame import ApiError, AsyncSesameAPI, PySesameException, RequestError

# --- Configuration ---
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)

AUTH_TOKEN = os.getenv("SESAME_AUTH_TOKEN")
DEVICE_ID = os.getenv("SESAME_DEVICE_ID")

if not all([AUTH_TOKEN, DEVICE_ID]):
    logging.error("Please set SESAME_AUTH_TOKEN and SESAME_DEVICE_ID environment variables.")
    sys.exit(1)

# --- Argument Parsing ---
parser = argparse.ArgumentParser(description="Lock or unlock a SESAME.")
parser.add_argument("command", choices=["lock", "unlock"], help="Command to send.")
parser.add_argument(
    "--interval", type=float, default=3.0, help="Seconds between result polls."
)
parser.add_argument(
    "--attempts", type=int, default=10, help="Maximum number of result polls."
)
args = parser.parse_args()


async def main():
    """Send the command, then poll its execution result until it terminates."""
    async with AsyncSesameAPI(AUTH_TOKEN) as api:
        try:
            status = await api.async_get_status(DEVICE_ID)
            logging.info(
                "Current status: locked=%s battery=%s responsive=%s",
                status.locked,
                status.battery,
                status.responsive,
            )

            control = await api.async_control(DEVICE_ID, args.command)
            logging.info("Command accepted, task id: %s", control.task_id)

            for _ in range(args.attempts):
                await asyncio.sleep(args.interval)
                result = await api.async_get_execution_result(control.task_id)
                logging.info("Task status: %s", result.status)
                if result.is_terminal:
                    if result.successful:
                        logging.info("Command '%s' succeeded.", args.command)
                    else:
                        logging.error("Command failed: %s", result.error)
                    return
            logging.warning("Task still processing after %d polls.", args.attempts)

        except ApiError as e:
            logging.error("API Error: Status=%s, Message=%s", e.status_code, e.error_message)
        except RequestError as e:
            logging.error("Request Error: %s", e)
        except PySesameException as e:
            logging.error("Error: %s", e)


if __name__ == "__main__":
    asyncio.run(main())
