import os

import uvicorn

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))


def main():
    uvicorn.run("receipt_points.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
