"""Jest and Playwright templates for migration validation tests.

Templates use ``string.Template`` placeholders so the JavaScript braces stay literal.
"""

from string import Template

SETUP = Template(
    """
// Migration test suite for $component
// Validates the semantic color migration
// Risk level: $risk ($tolerance% visual regression tolerance)

describe('$component - Semantic Color Migration', () => {
  // Test data for different component states
  const defaultProps = {
    // Add default props based on component analysis
  };"""
)

SEMANTIC_TOKENS = Template(
    """
  it('should use semantic color tokens instead of dark: classes', () => {
    const { container } = render(<$component {...defaultProps} />);

    // Check that no dark: classes remain
    const allElements = container.querySelectorAll('*');
    allElements.forEach(element => {
      const classes = element.className;
      expect(classes).not.toMatch(/dark:/);
    });

    // Verify semantic classes are present
    const semanticClasses = [
$semantic_classes
    ];

    const hasSemanticClasses = semanticClasses.some(cls =>
      container.innerHTML.includes(cls)
    );

    expect(hasSemanticClasses).toBe(true);
  });"""
)

NO_HARDCODED_COLORS = Template(
    """
  it('should not contain hardcoded color values', () => {
    const { container } = render(<$component {...defaultProps} />);
    const html = container.innerHTML;

    // Check for hardcoded hex colors
    const hexColorPattern = /#[0-9a-fA-F]{3,6}(?![0-9a-fA-F])/g;
    const hexMatches = html.match(hexColorPattern) || [];

    // Black and white are acceptable
    const invalidHexColors = hexMatches.filter(color =>
      !color.match(/#000000|#ffffff/i)
    );

    expect(invalidHexColors).toHaveLength(0);

    // Check for RGB/RGBA colors
    expect(html).not.toMatch(/rgba?\\([^)]+\\)/g);

    // Check for HSL/HSLA colors
    expect(html).not.toMatch(/hsla?\\([^)]+\\)/g);
  });"""
)

IMPORT_VALIDATION = Template(
    """
  it('should have proper imports for semantic utilities if needed', async () => {
    // Static check against the component source
    const componentSource = await import('$import_path?raw');

    if (componentSource.default.includes('getStatusClasses')) {
      expect(componentSource.default).toContain('import { getStatusClasses }');
    }

    if (componentSource.default.includes('cn(')) {
      expect(componentSource.default).toContain('import { cn }');
    }
  });"""
)

COMPILATION = Template(
    """
  it('should render without errors across prop variations', () => {
    expect(() => {
      render(<$component {...defaultProps} />);
    }).not.toThrow();

    const propVariations = [
      {},
      { className: 'custom-class' },
      { disabled: true },
      { variant: 'secondary' },
    ];

    propVariations.forEach(props => {
      expect(() => {
        render(<$component {...defaultProps} {...props} />);
      }).not.toThrow();
    });
  });"""
)

INTERACTIVE_STATES = Template(
    """
  it('should preserve interactive states after migration', () => {
    const { container, rerender } = render(<$component {...defaultProps} />);
    const element = container.firstElementChild;

    // Hover classes must not depend on dark:
    if (element) {
      const hoverClasses = element.className.match(/hover:[a-zA-Z0-9-]+/g) || [];
      hoverClasses.forEach(hoverClass => {
        expect(hoverClass).not.toContain('dark:');
      });
    }

    // Focus state
    if (element && element.tagName.match(/INPUT|BUTTON|TEXTAREA|SELECT/)) {
      element.focus();
      expect(document.activeElement).toBe(element);

      const focusClasses = element.className.match(/focus:[a-zA-Z0-9-]+/g) || [];
      focusClasses.forEach(focusClass => {
        expect(focusClass).not.toContain('dark:');
      });
    }

    // Disabled state if applicable
    if ('disabled' in defaultProps) {
      rerender(<$component {...defaultProps} disabled />);
      const disabledElement = container.firstElementChild;
      expect(disabledElement?.className).not.toMatch(/dark:/);
    }
  });"""
)

ACCESSIBILITY = Template(
    """
  it('should maintain accessibility after migration', () => {
    const { container } = render(<$component {...defaultProps} />);

    // Text should use semantic foreground colors
    const textElements = container.querySelectorAll('[class*="text-"]');
    textElements.forEach(element => {
      const classes = element.className;
      if (classes.includes('text-')) {
        expect(
          classes.includes('text-surface-foreground') ||
          classes.includes('text-muted-foreground') ||
          classes.includes('text-foreground')
        ).toBe(true);
      }
    });

    // Focus indicators stay visible
    const focusableElements = container.querySelectorAll('button, input, textarea, select, a[href]');
    focusableElements.forEach(element => {
      const classes = element.className;
      if (classes.includes('focus:')) {
        expect(classes).toMatch(/focus:(ring|outline)/);
      }
    });
  });"""
)

VISUAL_REGRESSION = Template(
    """
  // Visual regression test for Playwright
  visual('should match visual snapshot within $tolerance% tolerance', async ({ mount }) => {
    const component = await mount(
      <$component {...defaultProps} />
    );

    // Wait for any animations to complete
    await component.waitForTimeout(500);

    await expect(component).toHaveScreenshot('$snapshot-default.png', {
      maxDiffPixels: $tolerance,
      threshold: $threshold,
    });

    const states = ['hover', 'focus', 'active', 'disabled'];

    for (const state of states) {
      if (state === 'hover') {
        await component.hover();
      } else if (state === 'focus' && component.locator('input, button, textarea, select').count() > 0) {
        await component.locator('input, button, textarea, select').first().focus();
      } else if (state === 'disabled' && 'disabled' in defaultProps) {
        await mount(<$component {...defaultProps} disabled />);
      }

      await expect(component).toHaveScreenshot('$snapshot-' + state + '.png', {
        maxDiffPixels: $tolerance,
        threshold: $threshold,
      });
    }
  });"""
)
