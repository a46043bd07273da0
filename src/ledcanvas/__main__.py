from ledcanvas.cli import main

main()
