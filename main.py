# =============================================================================
# main.py  —  Interactive demo of the inventory assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py          (or: inventory-assistant)
#
# WHAT HAPPENS:
#   1. Loads .env (OPENROUTER_API_KEY, INVENTORY_* settings)
#   2. Creates the ADK agent, which spawns the inventory MCP server
#   3. Reads questions from the terminal and streams the agent's answers,
#      announcing each tool call as it happens
#
# Example questions:
#   "What electronics do we have?"
#   "Add 12 'Rust in Action' books at $49.50"
#   "Which products cost less than $30?"
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Must run before the agent is created: LiteLlm reads its API key from the
# environment when it initializes.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.inventory_agent import create_agent

APP_NAME = "inventory_assistant"
USER_ID = "demo_user"


async def run_agent():
    """Run the inventory assistant in a terminal loop until the user quits."""
    print("=" * 70)
    print("  PRODUCT INVENTORY ASSISTANT")
    print("  Powered by Google ADK + LiteLlm + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask about the inventory (type 'quit' to exit)")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


def cli():
    asyncio.run(run_agent())


if __name__ == "__main__":
    cli()
