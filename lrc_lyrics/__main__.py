from lrc_lyrics.cli import main

main()
