from bitter.tui.cli import main

main()
