import asyncio
import sys

from dotenv import load_dotenv
from loguru import logger

from odorant_assistant.app_config import load_json_config, parse_app_config, resolve_runtime_env
from odorant_assistant.bootstrap import bootstrap_runtime


async def main() -> None:
    load_dotenv()

    try:
        app = parse_app_config(load_json_config())
        runtime = bootstrap_runtime(app, resolve_runtime_env())
    except ValueError as ex:
        logger.error(str(ex))
        sys.exit(1)

    print("odorant-assistant (type 'exit' to quit, '/help' for commands)")
    print(f"Chatbot: {app.chatbot_name} ({app.chatbot_url})")
    if runtime.log_descriptions:
        print(f"Logging: {', '.join(runtime.log_descriptions)}")
    print()

    try:
        while True:
            try:
                user_input = input("you> ")
            except (EOFError, KeyboardInterrupt):
                break

            trimmed = user_input.strip()

            if trimmed in ("exit", "quit"):
                break

            if not trimmed:
                continue

            try:
                await runtime.assistant.run(user_input)
            except Exception as ex:
                logger.error(f"Unhandled error: {ex}")
    finally:
        await runtime.chatbot_client.aclose()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
