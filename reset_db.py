import asyncio
from shared.db import drop_models, init_models


async def reset_db():
    await drop_models()
    await init_models()

if __name__ == "__main__":
    asyncio.run(reset_db())
