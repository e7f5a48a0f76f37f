from makepw.makepw_strong import main


main()
