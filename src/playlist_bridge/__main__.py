from playlist_bridge.cli import main

main()
