"""Qt front end for the serial plotter."""
