"""
llm-sdk command line.

Builds one Client from the environment (see llm_sdk.config) and runs a single
operation with it:

    llm-sdk chat "Write a haiku about rust"
    llm-sdk chat --system "You are a pirate."        # interactive
    llm-sdk image "a chicken eating rice" --style natural
    llm-sdk speech "Hello there" -o hello.mp3 --voice nova
    llm-sdk transcribe meeting.mp3 --language en
    llm-sdk translate interview.mp3 --format srt
    llm-sdk embed "first text" "second text"
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

import httpx

from . import __version__
from .api.chat_completion import ChatCompletionModel
from .api.create_image import CreateImageRequestBuilder, ImageQuality, ImageSize, ImageStyle
from .api.embedding import EmbeddingRequest
from .api.speech import SpeechRequestBuilder, SpeechResponseFormat, SpeechVoice
from .api.whisper import WhisperRequest, WhisperRequestBuilder, WhisperRequestType, WhisperResponseFormat
from .core.client import Client
from .core.exceptions import LlmSdkError
from .ui.chat import ChatSession
from .ui.interface import UI
from .utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def _choices(enum_cls) -> List[str]:
    return [member.value for member in enum_cls]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="llm-sdk", description="Talk to an OpenAI-compatible API.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING... (default: $LLM_SDK_LOG_LEVEL or INFO)")
    sub = parser.add_subparsers(dest="command", required=True)

    chat = sub.add_parser("chat", help="chat completion; interactive when no prompt is given")
    chat.add_argument("prompt", nargs="?")
    chat.add_argument("--model", choices=_choices(ChatCompletionModel), default=ChatCompletionModel.default().value)
    chat.add_argument("--system", default=None, help="system prompt")
    chat.add_argument("--temperature", type=float, default=None)

    image = sub.add_parser("image", help="generate an image")
    image.add_argument("prompt")
    image.add_argument("--size", choices=_choices(ImageSize), default=None)
    image.add_argument("--quality", choices=_choices(ImageQuality), default=None)
    image.add_argument("--style", choices=_choices(ImageStyle), default=None)

    speech = sub.add_parser("speech", help="text to speech")
    speech.add_argument("text")
    speech.add_argument("-o", "--output", required=True, type=Path)
    speech.add_argument("--voice", choices=_choices(SpeechVoice), default=SpeechVoice.default().value)
    speech.add_argument("--format", choices=_choices(SpeechResponseFormat), default=SpeechResponseFormat.default().value)
    speech.add_argument("--speed", type=float, default=None)

    for name, help_text in (("transcribe", "speech to text"), ("translate", "speech to English text")):
        audio = sub.add_parser(name, help=help_text)
        audio.add_argument("file", type=Path)
        audio.add_argument("--format", choices=_choices(WhisperResponseFormat), default=WhisperResponseFormat.default().value)
        audio.add_argument("--prompt", default=None)
        if name == "transcribe":
            audio.add_argument("--language", default=None, help="ISO-639-1 code of the spoken language")

    embed = sub.add_parser("embed", help="embed one or more texts")
    embed.add_argument("texts", nargs="+")

    return parser


async def run_chat(client: Client, ui: UI, args) -> None:
    session = ChatSession(
        client,
        model=ChatCompletionModel(args.model),
        system_prompt=args.system,
        temperature=args.temperature,
    )

    if args.prompt:
        ui.show_reply(args.model, await session.send(args.prompt))
        return

    ui.show_msg("llm-sdk chat", f"model: {args.model}\n/reset clears the history, /exit quits", "bright_blue")
    while True:
        user_input = (await ui.get_input()).strip()
        if not user_input:
            continue
        if user_input == "/exit":
            break
        if user_input == "/reset":
            session.reset()
            ui.console.print("[yellow]History cleared.[/]")
            continue

        try:
            reply = await session.send(user_input)
        except (LlmSdkError, httpx.HTTPError) as e:
            # a failed turn should not end the conversation
            ui.show_error(str(e))
            continue
        ui.show_reply(args.model, reply)


async def run_image(client: Client, ui: UI, args) -> None:
    builder = CreateImageRequestBuilder(prompt=args.prompt)
    if args.size:
        builder.size(ImageSize(args.size))
    if args.quality:
        builder.quality(ImageQuality(args.quality))
    if args.style:
        builder.style(ImageStyle(args.style))

    ui.show_images(await client.create_image(builder.build()))


async def run_speech(client: Client, ui: UI, args) -> None:
    builder = SpeechRequestBuilder(input=args.text).voice(SpeechVoice(args.voice)).response_format(SpeechResponseFormat(args.format))
    if args.speed is not None:
        builder.speed(args.speed)

    audio = await client.speech(builder.build())
    args.output.write_bytes(audio)
    ui.console.print(f"[bold green]✓ Wrote {len(audio)} bytes to {args.output}[/]")


async def run_whisper(client: Client, ui: UI, args, request_type: WhisperRequestType) -> None:
    builder = WhisperRequestBuilder(
        file=args.file.read_bytes(),
        request_type=request_type,
        response_format=WhisperResponseFormat(args.format),
    )
    if args.prompt:
        builder.prompt(args.prompt)
    if getattr(args, "language", None):
        builder.language(args.language)

    req: WhisperRequest = builder.build()
    res = await client.whisper(req)
    ui.show_msg(request_type.value.capitalize(), res.text, "green")


async def run_embed(client: Client, ui: UI, args) -> None:
    res = await client.embedding(EmbeddingRequest.new(args.texts))
    ui.show_embeddings(args.texts, res)


async def run(args, ui: UI, client: Optional[Client] = None) -> int:
    client = client or Client.from_config()
    async with client:
        try:
            if args.command == "chat":
                await run_chat(client, ui, args)
            elif args.command == "image":
                await run_image(client, ui, args)
            elif args.command == "speech":
                await run_speech(client, ui, args)
            elif args.command == "transcribe":
                await run_whisper(client, ui, args, WhisperRequestType.TRANSCRIPTION)
            elif args.command == "translate":
                await run_whisper(client, ui, args, WhisperRequestType.TRANSLATION)
            elif args.command == "embed":
                await run_embed(client, ui, args)
        except (LlmSdkError, httpx.HTTPError) as e:
            logger.debug("command %s failed", args.command, exc_info=True)
            ui.show_error(str(e) or type(e).__name__)
            return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    ui = UI()
    try:
        return asyncio.run(run(args, ui))
    except KeyboardInterrupt:
        ui.console.print("\n[yellow]Interrupted.[/]")
        return 130


if __name__ == "__main__":
    sys.exit(main())
