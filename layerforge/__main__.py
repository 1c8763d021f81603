from layerforge.cli import main

main()
