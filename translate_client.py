import argparse
import os
from typing import Any

import requests

TRANSLATOR_URL = os.getenv("TRANSLATOR_URL", "http://127.0.0.1:3001")


def check_alive() -> str:
    response = requests.get(f"{TRANSLATOR_URL}/", timeout=10)
    response.raise_for_status()
    return response.text


def translate(text: str, target_lang: str) -> dict[str, Any]:
    response = requests.post(
        f"{TRANSLATOR_URL}/translate",
        json={"text": text, "targetLang": target_lang},
        timeout=30,
    )
    response.raise_for_status()
    return response.json()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Send a text to the translator API.")
    parser.add_argument("text")
    parser.add_argument("lang", help="target language ISO code, e.g. fr")
    args = parser.parse_args(argv)

    print("Server:", check_alive())
    result = translate(args.text, args.lang)
    print("Translation:", result["translated"])
    if "error" in result:
        print("Fallback used:", result["error"])


if __name__ == "__main__":
    main()
