# UI components package
