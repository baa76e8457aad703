from botcrawl.cli import main

main()
