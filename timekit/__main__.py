from timekit.cli import main

main()
