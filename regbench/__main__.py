from regbench.cli import main_entry

main_entry()
